from typing import Any, Protocol


class LanguageClient(Protocol):
    def notify(self, method: str, params: dict[str, Any]) -> bool: ...
