"""
Request gating for Chemion glasses
"""
from contextlib import asynccontextmanager
from typing import Optional

from utils.exceptions import RequestInProgressError


class CommandGate:
    """Allows a single service request at a time, rejecting overlaps

    Nothing is queued: a command issued while another one is waiting for the
    service fails immediately with RequestInProgressError.
    """

    def __init__(self, logger=None):
        self.logger = logger
        self._pending: Optional[str] = None

    @property
    def pending(self) -> Optional[str]:
        """Name of the command in flight, if any"""
        return self._pending

    @property
    def busy(self) -> bool:
        return self._pending is not None

    @asynccontextmanager
    async def hold(self, operation: str):
        """Hold the gate for the duration of one command"""
        # No await between the check and the assignment, the event loop
        # cannot interleave another command here
        if self._pending is not None:
            if self.logger:
                self.logger.warning(f"Rejected {operation}: {self._pending} in progress")
            raise RequestInProgressError(operation, self._pending)
        self._pending = operation
        try:
            yield
        finally:
            self._pending = None
