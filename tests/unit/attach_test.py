from collections.abc import Mapping
from unittest.mock import Mock

from copilot_bridge.config import BridgeSettings
from copilot_bridge.core.attach import AttachDecision, should_attach
from copilot_bridge.host.memory import InMemoryEditorHost


class StubFiletypePolicy:
    def __init__(self, disabled: bool, reason: str | None = None) -> None:
        self.disabled = disabled
        self.reason = reason
        self.calls: list[tuple[str, Mapping[str, bool]]] = []

    def is_ft_disabled(self, filetype: str, rules: Mapping[str, bool]) -> tuple[bool, str | None]:
        self.calls.append((filetype, rules))
        return self.disabled, self.reason


def test_filetype_rejection_wins_over_buffer_policy(host: InMemoryEditorHost) -> None:
    host.add_buffer(name="/tmp/notes.md", filetype="markdown")
    buffer_policy = Mock(return_value=False)
    settings = BridgeSettings(should_attach=buffer_policy)

    decision = should_attach(host, StubFiletypePolicy(True, "'filetype' markdown rejected by default"), settings)

    assert decision == AttachDecision(attach=False, reason="'filetype' markdown rejected by default")
    buffer_policy.assert_not_called()


def test_buffer_policy_rejection(host: InMemoryEditorHost) -> None:
    buf = host.add_buffer(name="/tmp/secret.env", filetype="sh")
    buffer_policy = Mock(return_value=False)
    settings = BridgeSettings(should_attach=buffer_policy)

    attach, reason = should_attach(host, StubFiletypePolicy(False), settings)

    assert attach is False
    assert reason == "copilot is disabled"
    buffer_policy.assert_called_once_with(buf.bufnr, "/tmp/secret.env")


def test_attaches_when_both_policies_pass(host: InMemoryEditorHost) -> None:
    host.add_buffer(name="/tmp/main.py", filetype="python")

    attach, reason = should_attach(host, StubFiletypePolicy(False))

    assert attach is True
    assert reason is None


def test_forwards_filetype_rules(host: InMemoryEditorHost) -> None:
    host.add_buffer(filetype="yaml")
    policy = StubFiletypePolicy(False)
    settings = BridgeSettings(filetypes={"yaml": True, "*": False})

    should_attach(host, policy, settings)

    assert policy.calls == [("yaml", {"yaml": True, "*": False})]


def test_explicit_buffer_handle(host: InMemoryEditorHost) -> None:
    host.add_buffer(filetype="python")
    other = host.add_buffer(filetype="gitcommit")
    policy = StubFiletypePolicy(False)

    should_attach(host, policy, bufnr=other.bufnr)

    assert policy.calls[0][0] == "gitcommit"
