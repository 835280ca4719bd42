from typing import Protocol


class EditorHost(Protocol):
    """Live editor surface the bridge reads buffer and window state from.

    Buffer handles are explicit; ``current_buffer`` only supplies a default.
    """

    def current_buffer(self) -> int: ...

    def version_output(self) -> str: ...

    def buffer_name(self, bufnr: int) -> str: ...

    def filetype(self, bufnr: int) -> str: ...

    def lines(self, bufnr: int) -> list[str]: ...

    def changedtick(self, bufnr: int) -> int: ...

    def cursor(self, bufnr: int) -> tuple[int, int]: ...

    def expandtab(self, bufnr: int) -> bool: ...

    def shiftwidth(self, bufnr: int) -> int: ...

    def cwd(self) -> str: ...

    def native_utf16_len(self, text: str) -> int | None: ...
