import os

from pydantic import BaseModel, ConfigDict, field_validator

from copilot_bridge.core.ports.policy import AttachPolicy, FiletypeRule


def _attach_everywhere(bufnr: int, bufname: str) -> bool:
    return True


class BridgeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    editor_name: str = "Neovim"
    plugin_name: str = "copilot.lua"
    # reflects the version of github/copilot-language-server-release
    server_version: str = "1.344.0"
    log_level: str = "WARNING"
    filetypes: dict[str, FiletypeRule] = {}
    should_attach: AttachPolicy = _attach_everywhere

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_settings() -> BridgeSettings:
    return BridgeSettings(
        editor_name=os.getenv("COPILOT_BRIDGE_EDITOR_NAME", "Neovim"),
        plugin_name=os.getenv("COPILOT_BRIDGE_PLUGIN_NAME", "copilot.lua"),
        server_version=os.getenv("COPILOT_BRIDGE_SERVER_VERSION", "1.344.0"),
        log_level=os.getenv("COPILOT_BRIDGE_LOG_LEVEL", "WARNING"),
    )
