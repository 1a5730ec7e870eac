__version__ = "0.1.0"

from .special import acot

__all__ = ["acot", "__version__"]
