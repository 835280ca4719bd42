"""Language client that writes framed JSON-RPC notifications to a byte stream."""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO

logger = logging.getLogger(__name__)


def encode_message(message: dict[str, Any]) -> bytes:
    payload = json.dumps(message).encode("utf-8")
    header = f"Content-Length: {len(payload)}\r\n\r\n".encode()
    return header + payload


class StdioLanguageClient:
    """Send one-way notifications over *stream* (e.g. a server's stdin).

    Implements the ``LanguageClient`` protocol. Nothing is read back.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def notify(self, method: str, params: dict[str, Any]) -> bool:
        message = {"jsonrpc": "2.0", "method": method, "params": params}
        try:
            self._stream.write(encode_message(message))
            self._stream.flush()
        except (OSError, ValueError):
            logger.exception("Failed to write %s notification", method)
            return False
        return True
