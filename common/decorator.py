import functools
import time

from common.helper import print_duration

# decorate() is called immed on import of module with @benchmark
# if run is derived from config, either load config before importing or wrap at call time
def benchmark(name: str, run: bool):
    def decorate(fn):
        if not run:
            return fn

        @functools.wraps(fn)
        def wrapper(*arg, **kwargs):
            t = time.time()
            try:
                return fn(*arg, **kwargs)
            finally:
                print_duration(name, t)

        return wrapper
    return decorate
