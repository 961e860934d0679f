import os

def get_file_full_path(path: str) -> str:
    if path.startswith("/"):
        return path

    return os.path.join(os.getcwd(), path)

def ensure_file_exists(path: str):
    if not os.path.exists(path):
        raise FileNotFoundError(f"File {path} does not exists")

def store_file_recursive(path: str, contents: bytes):
    """
    Writes contents to path, creating missing parent directories first.
    An existing file is overwritten.
    """
    parent = os.path.dirname(path)
    try:
        if parent != "":
            os.makedirs(parent, mode=0o755, exist_ok=True)
    except OSError as e:
        raise OSError(f"Failed to create directories for {path}: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(contents)
    except OSError as e:
        raise OSError(f"Failed to write file {path}: {e}") from e
