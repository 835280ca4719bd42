"""Wire models exchanged with the Copilot language server.

Attributes are snake_case in Python and serialize to the camelCase keys the
protocol expects (``model_dump(by_alias=True)``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Position(_WireModel):
    line: int
    character: int


class DocumentDescriptor(_WireModel):
    uri: str
    version: int
    relative_path: str
    insert_spaces: bool
    tab_size: int
    indent_size: int
    position: Position


class TextDocumentItem(_WireModel):
    uri: str
    language_id: str
    version: int
    text: str


class DidOpenParams(_WireModel):
    text_document: TextDocumentItem


class EditorInfo(_WireModel):
    name: str
    version: str | None = None


class EditorInfoBundle(_WireModel):
    editor_info: EditorInfo
    editor_plugin_info: EditorInfo
