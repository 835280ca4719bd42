from copilot_bridge.config import BridgeSettings, load_settings
from copilot_bridge.core.attach import AttachDecision, should_attach
from copilot_bridge.core.document import get_doc, get_doc_params
from copilot_bridge.core.info import get_editor_info, get_plugin_path, get_plugin_version
from copilot_bridge.core.text import strutf16len
from copilot_bridge.models import DocumentDescriptor, EditorInfo, EditorInfoBundle, Position

__all__ = [
    "AttachDecision",
    "BridgeSettings",
    "DocumentDescriptor",
    "EditorInfo",
    "EditorInfoBundle",
    "Position",
    "get_doc",
    "get_doc_params",
    "get_editor_info",
    "get_plugin_path",
    "get_plugin_version",
    "load_settings",
    "should_attach",
    "strutf16len",
]
