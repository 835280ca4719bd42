"""Editor and plugin identity reported to the language server."""

from __future__ import annotations

import functools
import importlib.util
import logging
import os
import re
from pathlib import Path

from copilot_bridge.config import BridgeSettings
from copilot_bridge.core.git import get_git_repo_root, get_head_commit
from copilot_bridge.core.ports.editor import EditorHost
from copilot_bridge.models import EditorInfo, EditorInfoBundle

logger = logging.getLogger(__name__)

_PACKAGE = "copilot_bridge"
_VERSION_PATTERN = re.compile(r"NVIM v(\S+)")
DEV_VERSION = "dev"


def parse_editor_version(version_output: str) -> str | None:
    match = _VERSION_PATTERN.search(version_output)
    return match.group(1) if match else None


def get_editor_info(host: EditorHost, settings: BridgeSettings | None = None) -> EditorInfoBundle:
    settings = settings or BridgeSettings()
    return EditorInfoBundle(
        editor_info=EditorInfo(name=settings.editor_name, version=parse_editor_version(host.version_output())),
        editor_plugin_info=EditorInfo(name=settings.plugin_name, version=settings.server_version),
    )


def get_plugin_path() -> Path | None:
    """Return the plugin checkout root (``<root>/src/copilot_bridge/__init__.py``)."""
    spec = importlib.util.find_spec(_PACKAGE)
    origin = spec.origin if spec is not None else None
    if origin and os.access(origin, os.R_OK):
        return Path(origin).parent.parent.parent
    logger.error("could not read %s", origin)
    return None


@functools.cache
def get_plugin_version() -> str:
    """Return the plugin's git commit, or ``"dev"``; resolved once per process.

    The commit is only reported when the plugin path is itself the root of a
    checkout, not a directory nested in some other repository.
    """
    plugin_dir = get_plugin_path()
    if plugin_dir is None:
        return DEV_VERSION
    repo_root = get_git_repo_root(plugin_dir)
    if repo_root is None or repo_root.resolve() != plugin_dir.resolve():
        return DEV_VERSION
    return get_head_commit(plugin_dir) or DEV_VERSION
