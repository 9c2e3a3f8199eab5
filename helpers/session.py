"""
Recompute session for rapid input edits.
Callers may compute from any thread; only the newest request may publish.
"""

import threading

from core.analysis import analyze


class ResponseSession:
    """
    Holds the single "current" analysis result.

    Requests are numbered as they start. A finished computation replaces
    `current` only if no newer request was started meanwhile; stale results
    are discarded. A failed newest request supersedes the previous result:
    `current` becomes None and the exception is kept in `error`.
    """

    def __init__(self, compute=analyze):
        self._compute = compute
        self._lock = threading.Lock()
        self._latest_ticket = 0
        self.current = None
        self.current_ticket = 0
        self.error = None

    @property
    def latest_ticket(self):
        with self._lock:
            return self._latest_ticket

    def next_ticket(self):
        with self._lock:
            self._latest_ticket += 1
            return self._latest_ticket

    def publish(self, ticket, result=None, error=None):
        """Stores a result or error for `ticket`; returns False if it is stale."""
        with self._lock:
            if ticket != self._latest_ticket:
                return False
            self.current = None if error is not None else result
            self.current_ticket = ticket
            self.error = error
            return True

    def compute(self, *args, **kwargs):
        """Runs one request on the calling thread; errors are recorded, then raised."""
        ticket = self.next_ticket()
        try:
            result = self._compute(*args, **kwargs)
        except Exception as e:
            self.publish(ticket, error=e)
            raise
        self.publish(ticket, result=result)
        return result
