from io import BufferedReader
from typing import Callable

from common.fold import FoldError, for_each_err

DEFAULT_BLOCK_SIZE = 2048 # 11 bit length

class StreamError(Exception):
    ...

class ByteFile:
    class _Iter:
        def __init__(self, file: BufferedReader, size: int):
            self._file = file
            self._size = size
            self._block = b""
            self._idx = 0

        def __iter__(self):
            return self

        def __next__(self) -> int:
            # finished handing out current block, pull the next one
            if self._idx == len(self._block):
                self._block = self._file.read(self._size)
                self._idx = 0

                # read returns b"" only on EOF
                if len(self._block) == 0:
                    raise StopIteration

            ret = self._block[self._idx]
            self._idx += 1
            return ret

    def __init__(self, path: str, size: int=DEFAULT_BLOCK_SIZE):
        if size < 1:
            raise ValueError(f"ByteFile block size must be at least 1. Size used '{size}'.")

        self._file: BufferedReader = None
        self._path = path
        self._size = size

    def open(self) -> "ByteFile._Iter":
        self._file = open(self._path, "rb") # let errors go through
        return ByteFile._Iter(self._file, self._size)

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self.open()

    def __exit__(self, type, value, traceback):
        self.close()

def iterate_file_bytes(path: str, fn: Callable[[int, int], None], size: int=DEFAULT_BLOCK_SIZE):
    """
    fn: (byte, offset) called for every byte of the file, in order.\n
    open errors go through as is. failures raised by fn and read errors
    are raised as StreamError with the original exception as __cause__.
    """
    with ByteFile(path, size) as reader:
        try:
            for_each_err(reader, fn)
        except FoldError as e:
            raise StreamError(f"Processing {path} stopped at byte {e.index}: {e.cause}") from e.cause
        except OSError as e:
            raise StreamError(f"Unable to read {path}: {e}") from e
