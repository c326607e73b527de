"""
Cooperative cancellation for blocking prompt loops.
"""

import threading

from .errors import OperationCancelledError


class CancellationToken:
    """
    Thread-safe cancellation flag.

    A prompt loop checks its token around every read; any thread (or a
    line source that hits end of input) may cancel it.
    """

    def __init__(self) -> None:
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        """
        Raises:
            OperationCancelledError: If cancellation has been requested
        """
        if self._cancel_event.is_set():
            raise OperationCancelledError()
