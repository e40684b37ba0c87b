"""
Pragma-related LSP capabilities.

Provides quick fixes adding missing LANGUAGE / OPTIONS_GHC pragmas and
completion inside pragmas.
"""

from __future__ import annotations

from lsprotocol.types import (
    CodeAction,
    CodeActionKind,
    CodeActionParams,
    CompletionList,
    CompletionParams,
    Range,
    TextEdit,
    WorkspaceEdit,
)

from pragmals.lsp.capabilities.capabilities import (
    CodeActionCapability,
    CompletionCapability,
)
from pragmals.pragmas.completion import complete_pragma
from pragmals.pragmas.insertion import next_pragma_position
from pragmals.pragmas.suggestions import PragmaEdit, suggest_all


class PragmasCodeActionCapability(CodeActionCapability):
    """Provides quick fixes that add a pragma suggested by a diagnostic."""

    @property
    def name(self) -> str:
        return "pragmas_code_action"

    async def can_handle(self, params: CodeActionParams) -> bool:
        return bool(params.context.diagnostics)

    async def get_code_actions(
        self, params: CodeActionParams
    ) -> list[CodeAction]:
        uri = params.text_document.uri
        snapshot = self.server.module_session.get_document_snapshot(uri)

        insert_range = next_pragma_position(snapshot.contents)
        edits = suggest_all(
            self.server.catalog,
            snapshot.flags,
            params.context.diagnostics,
            self.server.settings.warning_blacklist,
        )
        return [pragma_edit_to_action(uri, insert_range, edit) for edit in edits]


def pragma_edit_to_action(uri: str, range: Range, edit: PragmaEdit) -> CodeAction:
    """
    Quick fix inserting the pragma of ``edit`` at ``range``.

    The pragma name is assumed to be valid and is not validated.
    """
    return CodeAction(
        title=edit.title,
        kind=CodeActionKind.QuickFix,
        diagnostics=[],
        edit=WorkspaceEdit(
            changes={uri: [TextEdit(range=range, new_text=edit.pragma.render())]}
        ),
    )


class PragmasCompletionCapability(CompletionCapability):
    """Provides completion of pragma names, extensions and options."""

    @property
    def name(self) -> str:
        return "pragmas_completion"

    async def can_handle(self, params: CompletionParams) -> bool:
        """Check if the cursor is on a pragma line of an open buffer."""
        prefix = self.server.module_session.get_completion_prefix(
            params.text_document.uri, params.position
        )
        return prefix is not None and prefix.full_line.startswith("{-#")

    async def complete(self, params: CompletionParams) -> CompletionList:
        prefix = self.server.module_session.get_completion_prefix(
            params.text_document.uri, params.position
        )
        items = complete_pragma(self.server.catalog, prefix)
        return CompletionList(is_incomplete=False, items=items)
