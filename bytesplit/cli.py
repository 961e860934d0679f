import codecs
import os
import re
import sys
from argparse import ArgumentParser, Namespace

from bytesplit.config import Config
from bytesplit.log import init_logger
from bytesplit.path import get_file_full_path, ensure_file_exists, store_file_recursive
from bytesplit.stream import iterate_file_by_separator
from common.decorator import benchmark
from common.helper import PrintColor
from common.iter import StreamError
from common.string import str_trim, is_str_empty

# \\ first so an escaped backslash followed by u is left alone
_UNICODE_ESCAPE = re.compile(rb"\\\\|\\u([0-9a-fA-F]{4})|\\U([0-9a-fA-F]{8})")

def _utf8_escape(match: re.Match) -> bytes:
    hex = match.group(1) or match.group(2)
    if hex is None:
        return match.group(0)

    try:
        encoded = chr(int(hex, 16)).encode("utf-8")
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid separator escape {match.group(0).decode('ascii')}.") from e

    return b"".join(b"\\x%02x" % b for b in encoded)

def parse_separator(text: str) -> bytes:
    """
    Turns a command line separator into bytes.\n
    Byte escapes (\\n, \\t, \\x00...) are resolved as is. Unicode escapes
    (\\u00e9, \\U0001f600) and non-ascii characters become their utf-8 bytes,
    so "\\u00e9" and "é" give the same separator.
    """
    if is_str_empty(text):
        raise ValueError("Separator must not be empty.")

    raw = _UNICODE_ESCAPE.sub(_utf8_escape, text.encode("utf-8"))
    return codecs.escape_decode(raw)[0]

def _parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="bytesplit",
        description="Split FILE on a byte separator without loading it whole."
    )
    parser.add_argument("file")
    parser.add_argument("-s", "--separator", type=str, required=False,
        help="separator, backslash escapes allowed (default from config, else \\n)")
    parser.add_argument("-c", "--config", type=str, required=False,
        help="toml config file (default ./config.toml when present)")
    parser.add_argument("--skip-empty", action="store_true",
        help="drop empty chunks produced by adjacent separators")
    parser.add_argument("--trim", action="store_true",
        help="strip surrounding whitespace when printing chunks")
    parser.add_argument("--count", action="store_true",
        help="only print the number of chunks")
    parser.add_argument("-o", "--output", type=str, required=False,
        help="store each chunk as DIR/000000.bin, DIR/000001.bin ...")
    return parser

def _split(path: str, arg: Namespace) -> int:
    idx = 0

    def sink(chunk: bytes):
        nonlocal idx
        if arg.output is not None:
            store_file_recursive(os.path.join(arg.output, f"{idx:06d}.bin"), chunk)
        elif not arg.count:
            text = chunk.decode("utf-8", errors="replace")
            if arg.trim:
                text = str_trim(text)
            print(f"{idx}\t{text}")
        idx += 1

    return iterate_file_by_separator(
        path,
        Config.STREAM.SEPARATOR,
        sink,
        skip_empty=Config.STREAM.SKIP_EMPTY,
        size=Config.STREAM.BUFFER_SIZE
    )

def main(argv: list[str]=None) -> int:
    arg = _parser().parse_args(argv)

    try:
        Config.load_from_toml(arg.config)

        # command line wins over toml
        if arg.separator is not None:
            Config.STREAM.SEPARATOR = parse_separator(arg.separator)
        if arg.skip_empty:
            Config.STREAM.SKIP_EMPTY = True
    except (IOError, ValueError) as e:
        PrintColor.ERROR(str(e))
        return 2

    logger = init_logger(Config.LOG.LEVEL, Config.LOG.FILE)

    try:
        path = get_file_full_path(arg.file)
        ensure_file_exists(path)
        count = benchmark("split", Config.BENCHMARK)(_split)(path, arg)
    except (OSError, StreamError) as e:
        logger.error(str(e))
        return 1

    if arg.count:
        print(count)
    logger.info(f"{count} chunk/s from {path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
