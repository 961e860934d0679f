import inspect
import os
import tomllib
from typing import Callable

class Toml:
    class Spec:
        def __init__(self, key: str, default: any=None, callback: Callable=None):
            self.key = key
            self.default = default
            self.callback = callback

    def __init__(self, path: str, required=True):
        self._path = path
        self._required = required
        self._root: dict[str, any] = None

    def __enter__(self):
        if not self._required and not os.path.isfile(self._path):
            # optional file absent; every spec falls back to its default
            self._root = {}
            return self

        try:
            with open(self._path, "rb") as f:
                self._root = tomllib.load(f)
        except OSError as e:
            raise IOError(f"Unable to open {self._path} toml file.") from e
        except tomllib.TOMLDecodeError as e:
            raise IOError(f"Error decoding {self._path} toml file: {e}") from e

        return self

    def __exit__(self, type, value, traceback):
        self._root = None

    def load_to(self, obj: any):
        # specs are overwritten by their values on load. keep the originals
        # under _toml_specs so loading again re-reads from the spec
        specs: dict[str, Toml.Spec] = vars(obj).get("_toml_specs", {})
        subs = list()

        for attr in dir(obj):
            if attr.startswith("_"):
                continue

            sub = getattr(obj, attr)
            if inspect.isclass(sub):
                subs.append(sub)
            elif type(sub) is Toml.Spec:
                specs[attr] = sub

        for attr, spec in specs.items():
            val = self.parse(spec.key, spec.default)
            if spec.callback is not None:
                val = spec.callback(val)

            setattr(obj, attr, val)

        setattr(obj, "_toml_specs", specs)

        for sub in subs:
            self.load_to(sub)

    def parse(self, key: str, default: any=None) -> any:
        obj = self._root
        found = True

        for k in key.split("."):
            if isinstance(obj, dict) and obj.get(k) is not None:
                obj = obj[k]
            else:
                found = False
                break

        if found:
            return obj

        # if default has value, key is optional
        # if default is none, key is required
        if default is not None:
            return default
        else:
            raise ValueError(f"Key '{key}' not found in toml file.")
