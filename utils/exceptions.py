"""Error types raised by the Chemion glasses designer.

Every error carries a human readable ``message``. Errors coming back from
the glasses web service keep the service's message untouched so that it can
be shown to the user as is.
"""
from typing import Optional


class GlassesError(Exception):
    """Base exception for all designer errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RemoteServiceError(GlassesError):
    """A call to the glasses web service failed"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DiscoveryError(RemoteServiceError):
    """Device discovery failed"""


class DeviceConnectionError(RemoteServiceError):
    """Connecting to or disconnecting from the glasses failed"""


class EncodingError(RemoteServiceError):
    """The service could not encode a frame"""


class DisplayError(RemoteServiceError):
    """The service could not display an encoded frame"""


class NoSelectionError(GlassesError):
    """Connect was requested before a device was selected"""

    def __init__(self, message: str = "Please select a device first"):
        super().__init__(message)


class SelectionError(GlassesError):
    """Selected index does not point at a discovered device"""


class RequestInProgressError(GlassesError):
    """Another request is still waiting for the service"""

    def __init__(self, operation: str, pending: str):
        super().__init__(f"Cannot {operation} while {pending} is in progress")
        self.operation = operation
        self.pending = pending
