"""
Exceptions raised by the winding layout engine.
"""

from typing import Optional


class WindingLayoutError(Exception):
    """Base class for winding layout errors."""

    kind = 'winding_layout_error'


class InvalidConfiguration(WindingLayoutError, ValueError):
    """
    Raised when the slot/pole/phase inputs cannot produce a layout.

    Raised before any layout is built, so nothing partial is ever returned.

    Attributes:
        parameter: Name of the offending input (None if several are involved)
    """

    kind = 'invalid_configuration'

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.parameter = parameter

    def to_dict(self) -> dict:
        """Message and machine-checkable kind for callers that report errors."""
        return {
            'kind': self.kind,
            'parameter': self.parameter,
            'message': self.message
        }
