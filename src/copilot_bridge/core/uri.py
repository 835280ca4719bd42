import os
from pathlib import Path
from urllib.parse import unquote, urlparse


def uri_from_fname(path: str) -> str:
    """Convert an absolute filesystem path to a ``file://`` URI.

    Raises ``ValueError`` for relative paths.
    """
    return Path(path).as_uri()


def uri_to_fname(uri: str) -> str:
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise ValueError(f"Not a file URI: {uri}")
    return unquote(parsed.path)


def is_readable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)
