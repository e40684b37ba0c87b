"""
Module session.

Host-side view of the documents the pragma capabilities work on: the live
buffer, the file contents and the language extensions in effect for a
module. Extension snapshots are derived from the module header and cached
per document until the document changes.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Position,
)
from pygls.uris import uri_scheme

from pragmals.utils.text import split_lines

if TYPE_CHECKING:
    from pygls.workspace.text_document import TextDocument

    from pragmals.lsp.pragma_language_server import PragmaLanguageServer


PREFIX_PATTERN = re.compile(r"[A-Za-z0-9_']*$")
LANGUAGE_PRAGMA = re.compile(r"\{-#\s*LANGUAGE\b(?P<body>.*?)#-\}", re.DOTALL)


@dataclass(frozen=True)
class FlagsSnapshot:
    """Extensions explicitly switched on and off for one module."""

    enabled: frozenset[str] = field(default_factory=frozenset)
    disabled: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DocumentSnapshot:
    """
    What is known about a document at request time.

    Attributes:
        flags: Extension snapshot, None if the module header failed to parse.
        contents: Current text, None if the document cannot be read.
    """

    flags: FlagsSnapshot | None
    contents: str | None


@dataclass(frozen=True)
class CompletionPrefix:
    """The cursor line and the word typed right before the cursor."""

    full_line: str
    prefix_text: str


class HeaderParseError(ValueError):
    """Raised when a header pragma is never closed."""


def header_pragmas(lines: Sequence[str]) -> list[str]:
    """
    Pragmas (``{-# ... #-}``) of the module header, one string per pragma.

    The header ends at the first line that is neither blank, a shebang, a
    comment nor part of a pragma.

    Raises:
        HeaderParseError: If a pragma or block comment is not terminated.
    """
    pragmas: list[str] = []
    index = 0
    while index < len(lines):
        stripped = lines[index].strip()
        if not stripped or stripped.startswith(("#!", "--")):
            index += 1
            continue

        if stripped.startswith("{-"):
            closing = "#-}" if stripped.startswith("{-#") else "-}"
            block = [stripped]
            while closing not in " ".join(block)[3:]:
                index += 1
                if index >= len(lines):
                    raise HeaderParseError(f"unterminated {block[0][:3]} block")
                block.append(lines[index].strip())
            if closing == "#-}":
                pragmas.append(" ".join(block))
            index += 1
            continue

        break
    return pragmas


def parse_flags(
    contents: str,
    known_extensions: Collection[str],
    default_extensions: Collection[str] = (),
) -> FlagsSnapshot | None:
    """
    Extension snapshot for a module, or None if its header does not parse.

    ``NoX`` switches a known extension ``X`` off; pragmas further down the
    header override earlier ones.
    """
    try:
        pragmas = header_pragmas(split_lines(contents))
    except HeaderParseError:
        return None

    enabled = set(default_extensions)
    disabled: set[str] = set()
    for pragma in pragmas:
        match = LANGUAGE_PRAGMA.match(pragma)
        if not match:
            continue
        for name in match.group("body").split(","):
            name = name.strip()
            if not name:
                continue
            negated = name[2:] if name.startswith("No") else ""
            if name not in known_extensions and negated in known_extensions:
                disabled.add(negated)
                enabled.discard(negated)
            else:
                enabled.add(name)
                disabled.discard(name)

    return FlagsSnapshot(enabled=frozenset(enabled), disabled=frozenset(disabled))


class ModuleSession:
    """
    Per-document extension snapshots, kept current via text sync hooks.

    Usage:
        session = ModuleSession(server)
        session.register_text_sync_hooks()

        snapshot = session.get_document_snapshot(uri)
        prefix = session.get_completion_prefix(uri, position)
    """

    def __init__(self, server: PragmaLanguageServer) -> None:
        self.server = server
        # uri -> (contents the snapshot was parsed from, snapshot)
        self._flags: dict[str, tuple[str, FlagsSnapshot | None]] = {}

    def register_text_sync_hooks(self) -> None:
        """Invalidate snapshots on open, change and save, forget them on close."""
        text_sync = self.server.text_sync_manager
        if text_sync is None:
            return
        text_sync.add_on_open_hook(self._on_open)
        text_sync.add_on_change_hook(self._on_change)
        text_sync.add_on_save_hook(self._on_save)
        text_sync.add_on_close_hook(self._on_close)

    async def _on_open(self, params: DidOpenTextDocumentParams) -> None:
        self.invalidate(params.text_document.uri)

    async def _on_change(self, params: DidChangeTextDocumentParams) -> None:
        self.invalidate(params.text_document.uri)

    async def _on_save(self, params: DidSaveTextDocumentParams) -> None:
        self.invalidate(params.text_document.uri)

    async def _on_close(self, params: DidCloseTextDocumentParams) -> None:
        self.invalidate(params.text_document.uri)

    def invalidate(self, uri: str) -> None:
        self._flags.pop(uri, None)

    def get_contents(self, uri: str) -> str | None:
        """Current text of a file document; None for unreadable or non-file URIs."""
        if uri_scheme(uri) != "file":
            return None
        try:
            return self.server.workspace.get_text_document(uri).source
        except OSError:
            return None

    def get_flags(self, uri: str, contents: str | None = None) -> FlagsSnapshot | None:
        """
        Extension snapshot of a document.

        Snapshots are cached per document and reused only while the
        contents are the ones they were parsed from.
        """
        if contents is None:
            contents = self.get_contents(uri)
        if contents is None:
            return None

        cached = self._flags.get(uri)
        if cached is not None and cached[0] == contents:
            return cached[1]

        flags = parse_flags(
            contents,
            self.server.catalog.extensions,
            self.server.settings.default_extensions,
        )
        self._flags[uri] = (contents, flags)
        return flags

    def get_document_snapshot(self, uri: str) -> DocumentSnapshot:
        contents = self.get_contents(uri)
        return DocumentSnapshot(flags=self.get_flags(uri, contents), contents=contents)

    def get_virtual_document(self, uri: str) -> TextDocument | None:
        """The open buffer for ``uri``; documents not open in the editor have none."""
        return self.server.workspace.text_documents.get(uri)

    def get_completion_prefix(
        self, uri: str, position: Position
    ) -> CompletionPrefix | None:
        """
        Line under the cursor and the identifier-like word before it.

        Returns None when the document is not open, is not a file, or the
        position is outside the buffer.
        """
        if uri_scheme(uri) != "file":
            return None

        doc = self.get_virtual_document(uri)
        if doc is None:
            return None

        lines = split_lines(doc.source)
        if position.line >= len(lines):
            return None

        full_line = lines[position.line]
        before_cursor = full_line[: position.character]
        match = PREFIX_PATTERN.search(before_cursor)
        prefix_text = match.group(0) if match else ""
        return CompletionPrefix(full_line=full_line, prefix_text=prefix_text)
