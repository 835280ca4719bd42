"""UTF-16 helpers for protocol positions.

The language server counts columns in UTF-16 code units while the editor
reports cursor columns as UTF-8 byte offsets.
"""

from __future__ import annotations

import re
from typing import Any

from copilot_bridge.core.ports.editor import EditorHost
from copilot_bridge.models import Position

# Anything outside U+0001..U+FFFF, mirroring the host's fallback pattern.
_WIDE_CHARS = re.compile("[^\u0001-\uffff]")


def strutf16len(text: str, host: EditorHost | None = None) -> int:
    """Return the number of UTF-16 code units *text* occupies.

    Uses the host's native count when it offers one. The fallback widens every
    character outside the BMP (and NUL) to two placeholders and counts
    characters; it is an approximation, not exact surrogate accounting.
    """
    if host is not None:
        native = host.native_utf16_len(text)
        if native is not None:
            return native
    return len(_WIDE_CHARS.sub("  ", text))


def byte_col_to_utf16(line: str, byte_col: int, host: EditorHost | None = None) -> int:
    prefix = line.encode("utf-8")[:byte_col].decode("utf-8", errors="ignore")
    return strutf16len(prefix, host)


def make_position_params(host: EditorHost, bufnr: int | None = None) -> dict[str, Any]:
    """Build ``{textDocument, position}`` for the cursor in *bufnr*.

    The URI is left empty; callers substitute the document URI they resolved.
    """
    if bufnr is None:
        bufnr = host.current_buffer()
    row, byte_col = host.cursor(bufnr)
    line_index = row - 1
    lines = host.lines(bufnr)
    line = lines[line_index] if 0 <= line_index < len(lines) else ""
    return {
        "textDocument": {"uri": ""},
        "position": Position(line=line_index, character=byte_col_to_utf16(line, byte_col, host)),
    }
