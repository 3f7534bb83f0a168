# artwork_browser/errors.py

class BrowserError(Exception):
    """Base class for all artwork browser errors."""
    pass


class NetworkError(BrowserError):
    """The remote collection could not be reached or answered with an error status."""
    pass


class ParseError(BrowserError):
    """The remote collection answered with a payload we cannot read."""
    pass


class ConfigError(BrowserError):
    """Error related to configuration."""
    pass
