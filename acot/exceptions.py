class FixtureError(Exception):
    """Raised when reference fixture data is missing or malformed."""
