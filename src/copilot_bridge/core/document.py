"""Document identity for Copilot requests.

``get_doc`` resolves the protocol URI, version, relative path, indentation and
cursor position of a buffer. Buffers that are not readable on disk (unnamed or
not yet written) are announced to the server with a single
``textDocument/didOpen`` before the descriptor is returned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

from copilot_bridge.core.languages import extension_for, language_id_for
from copilot_bridge.core.ports.client import LanguageClient
from copilot_bridge.core.ports.editor import EditorHost
from copilot_bridge.core.text import make_position_params
from copilot_bridge.core.uri import is_readable_file, uri_from_fname, uri_to_fname
from copilot_bridge.models import DidOpenParams, DocumentDescriptor, TextDocumentItem

logger = logging.getLogger(__name__)

DID_OPEN = "textDocument/didOpen"


def relative_path(host: EditorHost, absolute: str) -> str:
    if not absolute:
        return absolute
    path = PurePath(absolute)
    try:
        return str(path.relative_to(host.cwd()))
    except ValueError:
        return path.name


def untitled_name(host: EditorHost, bufnr: int) -> str:
    return f"untitled-{bufnr}{extension_for(host.filetype(bufnr))}"


def create_copilot_uri(host: EditorHost, absolute: str, bufnr: int) -> str | None:
    """Return the URI for *absolute*, synthesizing one from cwd for unnamed buffers."""
    if absolute == "":
        absolute = os.path.join(host.cwd(), untitled_name(host, bufnr))
    try:
        return uri_from_fname(absolute)
    except ValueError:
        return None


def sync_document_content(host: EditorHost, client: LanguageClient | None, uri: str, bufnr: int) -> bool:
    if client is None:
        logger.error("No Copilot client available for document sync")
        return False

    params = DidOpenParams(
        text_document=TextDocumentItem(
            uri=uri,
            language_id=language_id_for(host.filetype(bufnr)),
            version=host.changedtick(bufnr),
            text="\n".join(host.lines(bufnr)),
        )
    )

    logger.debug("Sending %s for: %s", DID_OPEN, uri)
    if not client.notify(DID_OPEN, params.model_dump(by_alias=True)):
        logger.error("Failed to send %s notification", DID_OPEN)
        return False
    return True


def get_doc(host: EditorHost, client: LanguageClient | None, bufnr: int | None = None) -> DocumentDescriptor | None:
    if bufnr is None:
        bufnr = host.current_buffer()
    absolute = host.buffer_name(bufnr)

    copilot_uri = create_copilot_uri(host, absolute, bufnr)
    if copilot_uri is None:
        logger.error("Failed to create valid URI from %s", absolute)
        return None

    if not is_readable_file(uri_to_fname(copilot_uri)):
        if not sync_document_content(host, client, copilot_uri, bufnr):
            logger.error("Failed to sync document content with language server")
            return None

    params = make_position_params(host, bufnr)
    params["textDocument"]["uri"] = copilot_uri

    shiftwidth = host.shiftwidth(bufnr)
    return DocumentDescriptor(
        uri=params["textDocument"]["uri"],
        version=host.changedtick(bufnr),
        relative_path=relative_path(host, absolute),
        insert_spaces=host.expandtab(bufnr),
        tab_size=shiftwidth,
        indent_size=shiftwidth,
        position=params["position"],
    )


def get_doc_params(
    host: EditorHost,
    client: LanguageClient | None,
    overrides: Mapping[str, Any] | None = None,
    bufnr: int | None = None,
) -> dict[str, Any] | None:
    """Merge *overrides* into a fresh descriptor and promote its identity fields.

    ``overrides["doc"]`` wins per key inside ``doc``; other override keys are
    copied through, except ``textDocument`` and ``position`` which always
    reflect the merged ``doc``.
    """
    overrides = overrides or {}
    doc = get_doc(host, client, bufnr)
    if doc is None:
        return None

    merged_doc = {**doc.model_dump(by_alias=True), **(overrides.get("doc") or {})}
    params: dict[str, Any] = {**overrides, "doc": merged_doc}
    params["textDocument"] = {
        "uri": merged_doc["uri"],
        "version": merged_doc["version"],
        "relativePath": merged_doc["relativePath"],
    }
    params["position"] = merged_doc["position"]
    return params

