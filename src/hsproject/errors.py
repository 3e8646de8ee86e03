"""
Exception types raised by hsproject.

Only structural problems are raised as errors. Dangling references and
unparsable numeric text are absorbed by the resolver and never reach here.
"""

from typing import List, Optional


class HSProjectError(Exception):
    """Base class for all hsproject errors."""
    pass


class ProjectParseError(HSProjectError, ValueError):
    """Raised when a document cannot be read into the wire schema.

    Attributes:
        errors: Individual problems found, one message per entry
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors: List[str] = list(errors or [])
        if self.errors:
            details = "\n  - ".join(self.errors)
            message = f"{message}:\n  - {details}"
        super().__init__(message)


class ProjectSerializeError(HSProjectError):
    """Raised when a wire project cannot be encoded to JSON."""
    pass
