"""
Exceptions raised by the range search.

Errors from the grid library itself (bad coordinates, invalid cells) are not
wrapped: they reach the caller as h3 exceptions, exposed here under the name
ExternalLookupFailure so callers can catch them without importing h3.
"""
from h3 import H3BaseException as ExternalLookupFailure


class H3RangeError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(H3RangeError):
    """Edge-length table or tunables cannot resolve a query."""


class InvariantViolation(H3RangeError):
    """Internal arithmetic produced an impossible value."""


__all__ = [
    "ConfigurationError",
    "ExternalLookupFailure",
    "H3RangeError",
    "InvariantViolation",
]
