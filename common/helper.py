import time

class PrintColor:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    RESET = "\033[0m"

    @staticmethod
    def OK(input: str, stream=False):
        PrintColor._print(PrintColor.GREEN, input, stream)

    @staticmethod
    def WARN(input: str, stream=False):
        PrintColor._print(PrintColor.YELLOW, input, stream)

    @staticmethod
    def ERROR(input: str, stream=False):
        PrintColor._print(PrintColor.RED, input, stream)

    @staticmethod
    def paint(color: str, input: str) -> str:
        return f"{color}{input}{PrintColor.RESET}"

    @staticmethod
    def _print(color: str, input: str, stream: bool):
        if stream:
            print(PrintColor.paint(color, input), end="", flush=True)
        else:
            print(PrintColor.paint(color, input))

def print_duration(name: str, t: float):
    t = time.time() - t
    if t >= 1:
        # 1.1 sec
        PrintColor.OK(f"{name}: {t:.1f} sec")
    elif t < 1 and t >= 0.1:
        # 0.11 sec
        PrintColor.OK(f"{name}: {t:.2f} sec")
    elif t < 0.1 and t >= 0.001:
        # 99 ms
        t = t * 1000
        PrintColor.OK(f"{name}: {t:.0f} ms")
    else: # < 0.001
        # 999 μs
        t = t * 1000000
        PrintColor.OK(f"{name}: {t:.0f} μs")
