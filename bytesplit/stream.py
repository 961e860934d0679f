import logging
from typing import Callable

from common.iter import ByteFile, StreamError, DEFAULT_BLOCK_SIZE, iterate_file_bytes
from common.sequence import is_ends_with

logger = logging.getLogger("bytesplit")

def _validate_separator(sep: bytes) -> bytes:
    if isinstance(sep, str):
        raise TypeError("Separator must be bytes; encode text separators before use.")
    if len(sep) == 0:
        raise ValueError("FileStream separator is required.")
    return bytes(sep)

class SeparatorBuffer:
    """
    Accumulates bytes until they end with the separator.

    Chunks are handed out as fresh bytes objects, the internal buffer is
    cleared right after, so callers can keep a chunk for as long as they want.

    Every separator closes one chunk and opens the next, so input ending
    exactly on a separator drains one last empty chunk (b"a,b," gives
    b"a", b"b", b""). Input with no bytes at all drains nothing.
    """
    def __init__(self, sep: bytes):
        self._sep = _validate_separator(sep)
        self._buffer = bytearray()
        self._matched_last = False

    def push(self, byte: int) -> bytes | None:
        self._buffer.append(byte)
        self._matched_last = is_ends_with(self._buffer, self._sep)

        if not self._matched_last:
            return None

        ret = bytes(self._buffer[:len(self._buffer) - len(self._sep)])
        self._buffer.clear()
        return ret

    def drain(self) -> bytes | None:
        # EOF; hand out whatever followed the last separator
        if len(self._buffer) == 0 and not self._matched_last:
            return None

        ret = bytes(self._buffer)
        self._buffer.clear()
        self._matched_last = False
        return ret

def iterate_file_by_separator(
    path: str,
    sep: bytes,
    fn: Callable[[bytes], None],
    skip_empty=False,
    size: int=DEFAULT_BLOCK_SIZE
) -> int:
    """
    Calls fn once per chunk of the file at path, separator excluded.\n
    Adjacent separators produce an empty chunk unless skip_empty is set,
    so does a file ending exactly on the separator.
    A trailing chunk not ended by the separator is delivered at EOF.\n
    Returns the number of chunks delivered.
    """
    buffer = SeparatorBuffer(sep)
    count = 0

    def deliver(chunk: bytes | None):
        nonlocal count
        if chunk is None:
            return
        if skip_empty and len(chunk) == 0:
            return

        fn(chunk)
        count += 1

    logger.debug(f"Splitting {path} on {sep!r}")
    iterate_file_bytes(path, lambda byte, _: deliver(buffer.push(byte)), size)

    try:
        deliver(buffer.drain())
    except Exception as e:
        raise StreamError(f"Processing {path} stopped at trailing chunk: {e}") from e

    logger.debug(f"Delivered {count} chunk/s from {path}")
    return count

class FileStream:
    """
    Pull-style counterpart of iterate_file_by_separator.

        with FileStream("./data.bin", b"\\r\\n") as stream:
            for chunk in stream:
                ...

    The file closes on EOF, on a read error, on close() or when leaving
    the with block.
    """
    def __init__(self, path: str, sep: bytes, skip_empty=False, size: int=DEFAULT_BLOCK_SIZE):
        self._buffer = SeparatorBuffer(sep)
        self._skip_empty = skip_empty
        self._file = ByteFile(path, size)
        self._reader = self._file.open() # let errors go through
        self._eof = False

    def __iter__(self):
        return self

    def __next__(self) -> bytes:
        if self._eof:
            raise StopIteration

        try:
            for byte in self._reader:
                chunk = self._buffer.push(byte)
                if chunk is None:
                    continue
                if self._skip_empty and len(chunk) == 0:
                    continue
                return chunk
        except OSError:
            # stream is unusable past a failed read
            self.close()
            raise

        self.close()
        chunk = self._buffer.drain()
        if chunk is None or (self._skip_empty and len(chunk) == 0):
            raise StopIteration

        return chunk

    def close(self):
        self._eof = True
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.close()
