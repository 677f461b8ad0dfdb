"""
Error types raised by the cross-browser support layer.

Two kinds of failure reach the host:
    - TypeMismatch: an argument has the wrong host type
    - DomainLookupFailure: a well-typed argument names an unknown
      browser, version or capability

The dataset raises DatasetError; entry points translate it into
DomainLookupFailure with the same message.
"""


class CrossBrowserError(Exception):
    """Base class for all errors raised by this package."""
    pass


class TypeMismatch(CrossBrowserError, TypeError):
    """Raised when an argument is not of the expected host type."""
    pass


class ArityMismatch(TypeMismatch):
    """Raised when an entry point is called with an undeclared argument count."""
    pass


class DomainLookupFailure(CrossBrowserError, LookupError):
    """Raised when a browser, version or capability is not in the dataset."""
    pass


class DatasetError(CrossBrowserError, ValueError):
    """Raised by the capability dataset on unknown names or bad data."""
    pass


class AspectNotSupported(CrossBrowserError, ValueError):
    """Raised when a value is asked to render an aspect it does not support."""
    pass


class SerializationError(CrossBrowserError, TypeError):
    """Raised when a value tree cannot be converted to or from a dict."""
    pass
