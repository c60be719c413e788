"""Thread-safe output of messages built in private buffers."""

from __future__ import annotations

import io
import sys
import threading
from typing import TextIO


class SafeCout:
    """Writes whole buffered messages to a stream under a lock.

    Messages are built without locking in a StringIO; only the final
    write is serialised.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def flush(self, buffer: io.StringIO) -> str:
        """Write the buffer's content and a newline, then empty the buffer."""
        out = sys.stdout if self._stream is None else self._stream
        with self._lock:
            text = buffer.getvalue()
            out.write(text + "\n")
            out.flush()
        buffer.seek(0)
        buffer.truncate(0)
        return text