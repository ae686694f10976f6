"""
Guarded streams.

A GuardedStream wraps a binary readable so that a failure while the data is
being consumed is never lost: it is recorded on the stream, logged, and
raised to whoever is reading. Once a stream has failed, every later read
raises the same error.
"""

import io
import logging
from typing import Any, Iterator, Optional

logger = logging.getLogger("podstore.stream")

DEFAULT_CHUNK_SIZE = 65536


class GuardedStream:
    """Binary stream passthrough that keeps consumption errors observable."""

    def __init__(self, stream: Any):
        if isinstance(stream, (bytes, bytearray)):
            stream = io.BytesIO(stream)
        if not hasattr(stream, "read"):
            raise TypeError(f"Expected a readable binary stream, got {type(stream).__name__}")
        self._stream = stream
        self.error: Optional[BaseException] = None
        self.closed = False

    def readable(self) -> bool:
        return not self.closed

    def read(self, size: int = -1) -> bytes:
        if self.error is not None:
            raise self.error
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        try:
            return self._stream.read(size)
        except Exception as e:
            self.error = e
            logger.debug(f"Stream failed while being read: {e}")
            raise

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        chunk = self.read(chunk_size)
        while chunk:
            yield chunk
            chunk = self.read(chunk_size)

    def __iter__(self) -> Iterator[bytes]:
        return self.iter_chunks()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        close = getattr(self._stream, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "GuardedStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def is_guarded(stream: Any) -> bool:
    return isinstance(stream, GuardedStream)


def guard_stream(stream: Any) -> GuardedStream:
    """Wrap a stream (or bytes) once; already guarded streams are returned as is."""
    if is_guarded(stream):
        return stream
    return GuardedStream(stream)
