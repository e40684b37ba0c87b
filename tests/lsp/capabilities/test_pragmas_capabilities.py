from unittest.mock import Mock

import pytest
from lsprotocol.types import (
    CodeActionContext,
    CodeActionKind,
    CodeActionParams,
    CompletionParams,
    Diagnostic,
    Position,
    Range,
    TextDocumentIdentifier,
    TextEdit,
)
from pygls.workspace.text_document import TextDocument

from pragmals.config import Settings
from pragmals.lsp.capabilities.pragmas_capabilities import (
    PragmasCodeActionCapability,
    PragmasCompletionCapability,
)
from pragmals.pragmas.catalog import PragmaCatalog
from pragmals.workspace.session import ModuleSession

URI = "file:///project/src/Lib.hs"

SOURCE = """\
{-# LANGUAGE LambdaCase #-}
{-# OPTIONS_GHC -Wall #-}
module Lib where

f = (,1)
"""


def diagnostic(message: str, code=None) -> Diagnostic:
    return Diagnostic(
        range=Range(start=Position(line=4, character=4), end=Position(line=4, character=8)),
        message=message,
        code=code,
    )


def code_action_params(diagnostics) -> CodeActionParams:
    return CodeActionParams(
        text_document=TextDocumentIdentifier(uri=URI),
        range=Range(start=Position(line=4, character=4), end=Position(line=4, character=4)),
        context=CodeActionContext(diagnostics=diagnostics),
    )


@pytest.fixture
def mock_server():
    server = Mock()
    server.catalog = PragmaCatalog.default()
    server.settings = Settings()
    server.text_sync_manager = None
    server.workspace.get_text_document.return_value.source = SOURCE
    server.workspace.text_documents = {URI: TextDocument(URI, source=SOURCE)}
    server.module_session = ModuleSession(server)
    return server


class TestPragmasCodeActionCapability:

    @pytest.fixture
    def capability(self, mock_server):
        return PragmasCodeActionCapability(mock_server)

    @pytest.mark.asyncio
    async def test_can_handle_needs_diagnostics(self, capability):
        assert await capability.can_handle(code_action_params([])) is False
        assert await capability.can_handle(code_action_params([diagnostic("x")])) is True

    @pytest.mark.asyncio
    async def test_quick_fix_for_missing_extension(self, capability):
        params = code_action_params([diagnostic("Illegal tuple section: use TupleSections")])
        actions = await capability.get_code_actions(params)

        assert len(actions) == 1
        action = actions[0]
        assert action.title == 'Add "TupleSections"'
        assert action.kind == CodeActionKind.QuickFix
        assert action.diagnostics == []

        insert_at = Position(line=2, character=0)
        assert action.edit.changes == {
            URI: [
                TextEdit(
                    range=Range(start=insert_at, end=insert_at),
                    new_text="{-# LANGUAGE TupleSections #-}\n",
                )
            ]
        }

    @pytest.mark.asyncio
    async def test_enabled_extension_not_suggested(self, capability):
        params = code_action_params([diagnostic("Illegal lambda-case (use LambdaCase)")])
        assert await capability.get_code_actions(params) == []

    @pytest.mark.asyncio
    async def test_all_actions_share_insertion_point(self, capability):
        params = code_action_params(
            [
                diagnostic("use TupleSections"),
                diagnostic("Defined but not used: g", code="-Wunused-top-binds"),
                diagnostic("use TupleSections"),
            ]
        )
        actions = await capability.get_code_actions(params)

        assert [a.title for a in actions] == [
            'Add "TupleSections"',
            'Disable "unused-top-binds" warnings',
        ]
        ranges = {a.edit.changes[URI][0].range.start.line for a in actions}
        assert ranges == {2}

    @pytest.mark.asyncio
    async def test_unreadable_document_inserts_at_top(self, capability, mock_server):
        mock_server.workspace.get_text_document.side_effect = FileNotFoundError()
        params = code_action_params([diagnostic("use LambdaCase")])

        actions = await capability.get_code_actions(params)

        # Without contents there are no flags either, so LambdaCase is offered.
        assert [a.title for a in actions] == ['Add "LambdaCase"']
        assert actions[0].edit.changes[URI][0].range.start == Position(line=0, character=0)

    @pytest.mark.asyncio
    async def test_configured_blacklist(self, capability, mock_server):
        mock_server.settings = Settings(warning_blacklist=frozenset({"unused-top-binds"}))
        params = code_action_params([diagnostic("unused", code="-Wunused-top-binds")])

        assert await capability.get_code_actions(params) == []


class TestPragmasCompletionCapability:

    @pytest.fixture
    def capability(self, mock_server):
        return PragmasCompletionCapability(mock_server)

    def completion_params(self, line: int, character: int) -> CompletionParams:
        return CompletionParams(
            text_document=TextDocumentIdentifier(uri=URI),
            position=Position(line=line, character=character),
        )

    @pytest.mark.asyncio
    async def test_can_handle_on_pragma_line(self, capability):
        assert await capability.can_handle(self.completion_params(0, 16)) is True

    @pytest.mark.asyncio
    async def test_cannot_handle_code_line(self, capability):
        assert await capability.can_handle(self.completion_params(2, 3)) is False

    @pytest.mark.asyncio
    async def test_complete_extension(self, capability, mock_server):
        mock_server.workspace.text_documents[URI] = TextDocument(
            URI, source="{-# LANGUAGE Sco\nmodule Lib where\n"
        )
        result = await capability.complete(self.completion_params(0, 16))

        assert result.is_incomplete is False
        assert "ScopedTypeVariables" in [item.label for item in result.items]

    @pytest.mark.asyncio
    async def test_complete_unknown_document(self, capability):
        params = CompletionParams(
            text_document=TextDocumentIdentifier(uri="file:///nowhere.hs"),
            position=Position(line=0, character=0),
        )
        result = await capability.complete(params)
        assert result.items == []
