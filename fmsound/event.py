"""Event objects that threads can wait on, with auto- and manual-reset modes."""

from __future__ import annotations

import threading


class Event:
    """A signalable event.

    A manual-reset event stays signaled until :meth:`reset` is called and
    releases every waiter.  An auto-reset event releases one waiter and then
    goes back to the non-signaled state.
    """

    def __init__(self, manual_reset=False, initial_state=False):
        self._cond = threading.Condition(threading.Lock())
        self._manual_reset = bool(manual_reset)
        self._signaled = False
        self._generation = 0
        self._waiters = 0
        self._permits = 0
        self._closed = False
        if initial_state:
            self.set()

    @property
    def manual_reset(self):
        return self._manual_reset

    def __bool__(self):
        return not self._closed

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _check_open(self):
        if self._closed:
            raise RuntimeError("event is closed")

    def set(self):
        """Put the event into the signaled state and wake waiters."""
        with self._cond:
            self._check_open()
            self._signaled = True
            if self._manual_reset:
                self._cond.notify_all()
            else:
                self._cond.notify()
        return True

    def reset(self):
        """Put the event into the non-signaled state."""
        with self._cond:
            self._check_open()
            self._signaled = False
        return True

    def pulse(self):
        """Release the current waiters and leave the event non-signaled.

        A manual-reset event releases every thread waiting right now; an
        auto-reset event releases at most one of them.
        """
        with self._cond:
            self._check_open()
            self._signaled = False
            if self._manual_reset:
                self._generation += 1
                self._cond.notify_all()
            elif self._waiters > self._permits:
                self._permits += 1
                self._cond.notify_all()
        return True

    def wait(self, milliseconds=None):
        """Wait for the event; return True on timeout, False when released.

        ``milliseconds`` of None waits forever; 0 only polls.
        """
        timeout = None if milliseconds is None else max(0, milliseconds) / 1000.0
        with self._cond:
            self._check_open()
            if self._signaled:
                if not self._manual_reset:
                    self._signaled = False
                return False
            if timeout == 0:
                return True

            generation = self._generation
            self._waiters += 1
            try:

                def released():
                    if self._closed or self._signaled:
                        return True
                    if self._manual_reset:
                        return self._generation != generation
                    return self._permits > 0

                if not self._cond.wait_for(released, timeout):
                    return True
                self._check_open()
                if self._signaled:
                    if not self._manual_reset:
                        self._signaled = False
                    return False
                if not self._manual_reset:
                    self._permits -= 1
                return False
            finally:
                self._waiters -= 1
                self._permits = min(self._permits, self._waiters)

    def close(self):
        """Close the event; return True if it was open."""
        with self._cond:
            if self._closed:
                return False
            self._closed = True
            self._cond.notify_all()
            return True