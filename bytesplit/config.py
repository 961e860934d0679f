import logging

from common.toml import Toml

DEFAULT_CONFIG_PATH = "./config.toml"

class _min_max:
    def __init__(self, min, max): # no type; can be int or float
        self.MIN = min
        self.MAX = max

class Config:
    class _stream:
        # toml strings are text; the reader matches raw bytes
        SEPARATOR = Toml.Spec("stream.separator", "\n", lambda x: x.encode("utf-8"))
        SKIP_EMPTY = Toml.Spec("stream.skip_empty", False)

        BUFFER_SIZE_LIMIT = _min_max(1, 1 << 20)
        BUFFER_SIZE = Toml.Spec("stream.buffer_size", 2048)
    STREAM = _stream

    class _log:
        LEVEL = Toml.Spec("log.level", "INFO", lambda x: x.upper())
        # empty means console only
        FILE = Toml.Spec("log.file", "")
    LOG = _log

    BENCHMARK = Toml.Spec("benchmark", False)

    @staticmethod
    def load_from_toml(config_path: str=None):
        """
        config_path None reads ./config.toml when present, defaults otherwise.
        An explicit config_path must exist.
        """
        if config_path is None:
            toml = Toml(DEFAULT_CONFIG_PATH, required=False)
        else:
            toml = Toml(config_path)

        with toml as t:
            t.load_to(Config)

        # validations
        def minmax_validate(val, limit: _min_max, text: str):
            if val < limit.MIN or val > limit.MAX:
                raise ValueError(f"Config {text} must be {limit.MIN} to {limit.MAX}.")

        minmax_validate(Config.STREAM.BUFFER_SIZE, Config.STREAM.BUFFER_SIZE_LIMIT, "[stream] buffer_size")

        if len(Config.STREAM.SEPARATOR) == 0:
            raise ValueError("Config [stream] separator must not be empty.")

        if Config.LOG.LEVEL not in logging.getLevelNamesMapping():
            raise ValueError(f"Config [log] level '{Config.LOG.LEVEL}' is not a valid log level.")
