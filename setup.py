#!/usr/bin/env python

from setuptools import setup

from acot import __version__


setup(
    name="acot",
    version=__version__,
    description="Inverse cotangent of double-precision floats, with an accuracy harness",
    packages=["acot", "acot.test",],
    package_data={"acot.test": ["fixtures/*.json"]},
    python_requires=">=3.9",
    install_requires=[
        # Generic:
        "typing-extensions>=3.7",
        "loguru>=0.4",
        # Computation:
        "numpy>=1.19",
    ],
    extras_require={"test": ["pytest"]},
)
