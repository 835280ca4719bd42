from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from copilot_bridge.config import BridgeSettings
from copilot_bridge.core.ports.editor import EditorHost
from copilot_bridge.core.ports.policy import FiletypePolicy

DISABLED_REASON = "copilot is disabled"


@dataclass(frozen=True)
class AttachDecision:
    attach: bool
    reason: str | None = None

    def __iter__(self) -> Iterator[bool | str | None]:
        return iter((self.attach, self.reason))


def should_attach(
    host: EditorHost,
    filetype_policy: FiletypePolicy,
    settings: BridgeSettings | None = None,
    bufnr: int | None = None,
) -> AttachDecision:
    """Decide whether the client attaches to *bufnr*.

    The filetype policy is consulted first and its reason wins; the buffer
    policy from settings only runs when the filetype is enabled.
    """
    settings = settings or BridgeSettings()
    if bufnr is None:
        bufnr = host.current_buffer()

    ft_disabled, ft_disabled_reason = filetype_policy.is_ft_disabled(host.filetype(bufnr), settings.filetypes)
    if ft_disabled:
        return AttachDecision(attach=False, reason=ft_disabled_reason)

    if not settings.should_attach(bufnr, host.buffer_name(bufnr)):
        return AttachDecision(attach=False, reason=DISABLED_REASON)

    return AttachDecision(attach=True)
