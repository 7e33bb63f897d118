import re
import threading
import time

# anything outside this set becomes "_"
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.\-_]")


def sanitize_filename(name: str) -> str:
    """
    Map an untrusted client filename onto the on-disk alphabet [a-z0-9._-].
    Path separators are replaced like any other character, so the result never
    leaves the upload directory.
    """
    return _UNSAFE_CHARS.sub("_", name).lower()


def stored_name(stamp: int, name: str) -> str:
    return f"{stamp}_{sanitize_filename(name)}"


class TimestampSequence:
    """
    Millisecond timestamps that strictly increase within one process.
    Two calls in the same millisecond get consecutive values instead of
    the same one.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            stamp = self._clock()
            if stamp <= self._last:
                stamp = self._last + 1
            self._last = stamp
            return stamp
