from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_DEFAULT_VERSION_OUTPUT = "\nNVIM v0.11.0\nBuild type: Release\n"


def _split_lines(text: str) -> list[str]:
    """Split on newlines only; form feeds and other separators stay in the line."""
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class InMemoryBuffer:
    bufnr: int
    name: str = ""
    filetype: str = ""
    lines: list[str] = field(default_factory=lambda: [""])
    changedtick: int = 1
    cursor: tuple[int, int] = (1, 0)
    expandtab: bool = True
    shiftwidth: int = 4

    def set_lines(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.changedtick += 1


class InMemoryEditorHost:
    """Editor host backed by plain Python objects.

    Implements the ``EditorHost`` protocol.
    """

    def __init__(
        self,
        cwd: str | Path,
        version_output: str = _DEFAULT_VERSION_OUTPUT,
        native_utf16_len: Callable[[str], int] | None = None,
    ) -> None:
        self.buffers: dict[int, InMemoryBuffer] = {}
        self._cwd = str(cwd)
        self._version_output = version_output
        self._native_utf16_len = native_utf16_len
        self._current: int | None = None
        self._next_bufnr = 1

    def add_buffer(
        self,
        name: str = "",
        filetype: str = "",
        lines: list[str] | None = None,
        cursor: tuple[int, int] = (1, 0),
        expandtab: bool = True,
        shiftwidth: int = 4,
        bufnr: int | None = None,
    ) -> InMemoryBuffer:
        if bufnr is None:
            bufnr = self._next_bufnr
        if bufnr in self.buffers:
            raise ValueError(f"Buffer {bufnr} already exists")
        buf = InMemoryBuffer(
            bufnr=bufnr,
            name=name,
            filetype=filetype,
            lines=list(lines) if lines is not None else [""],
            cursor=cursor,
            expandtab=expandtab,
            shiftwidth=shiftwidth,
        )
        self.buffers[buf.bufnr] = buf
        self._next_bufnr = max(self._next_bufnr, bufnr + 1)
        if self._current is None:
            self._current = buf.bufnr
        return buf

    @classmethod
    def from_file(cls, path: str | Path, filetype: str = "", cwd: str | Path | None = None) -> InMemoryEditorHost:
        file_path = Path(path).resolve()
        host = cls(cwd if cwd is not None else Path.cwd())
        host.add_buffer(
            name=str(file_path),
            filetype=filetype,
            lines=_split_lines(file_path.read_text(encoding="utf-8")),
        )
        return host

    def set_current(self, bufnr: int) -> None:
        if bufnr not in self.buffers:
            raise KeyError(f"Unknown buffer {bufnr}")
        self._current = bufnr

    def _buffer(self, bufnr: int) -> InMemoryBuffer:
        try:
            return self.buffers[bufnr]
        except KeyError:
            raise KeyError(f"Unknown buffer {bufnr}") from None

    def current_buffer(self) -> int:
        if self._current is None:
            raise LookupError("No buffers loaded")
        return self._current

    def version_output(self) -> str:
        return self._version_output

    def buffer_name(self, bufnr: int) -> str:
        return self._buffer(bufnr).name

    def filetype(self, bufnr: int) -> str:
        return self._buffer(bufnr).filetype

    def lines(self, bufnr: int) -> list[str]:
        return list(self._buffer(bufnr).lines)

    def changedtick(self, bufnr: int) -> int:
        return self._buffer(bufnr).changedtick

    def cursor(self, bufnr: int) -> tuple[int, int]:
        return self._buffer(bufnr).cursor

    def expandtab(self, bufnr: int) -> bool:
        return self._buffer(bufnr).expandtab

    def shiftwidth(self, bufnr: int) -> int:
        return self._buffer(bufnr).shiftwidth

    def cwd(self) -> str:
        return self._cwd

    def native_utf16_len(self, text: str) -> int | None:
        if self._native_utf16_len is None:
            return None
        return self._native_utf16_len(text)
