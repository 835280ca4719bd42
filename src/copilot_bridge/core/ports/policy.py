from collections.abc import Callable, Mapping
from typing import Protocol

AttachPolicy = Callable[[int, str], bool]
# A rule is either a flag or a callable evaluated when the buffer is checked.
FiletypeRule = bool | Callable[[], bool]


class FiletypePolicy(Protocol):
    def is_ft_disabled(self, filetype: str, rules: Mapping[str, FiletypeRule]) -> tuple[bool, str | None]: ...
