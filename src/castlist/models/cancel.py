"""Per-load tickets for the media list model."""

import itertools
import threading

_serials = itertools.count(1)


class LoadTicket:
    """Identifies one media list load and carries its cancellation flag.

    The model holds the ticket of the load in flight. A completion is
    committed only while its ticket is still current and not cancelled,
    so a superseded or cancelled load can never touch the model.

    Example:
        >>> ticket = LoadTicket("https://example.com/media.json")
        >>> ticket.cancel()
        True
        >>> ticket.cancel()
        False
    """

    __slots__ = ("url", "serial", "_cancelled", "_lock")

    def __init__(self, url: str) -> None:
        self.url = url
        self.serial = next(_serials)
        self._cancelled = False
        self._lock = threading.Lock()

    def cancel(self) -> bool:
        """Mark the load as cancelled.

        Returns:
            True if this call cancelled the load, False if it already was.
        """
        with self._lock:
            if self._cancelled:
                return False
            self._cancelled = True
            return True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "active"
        return f"LoadTicket(#{self.serial} {self.url!r}, {state})"
