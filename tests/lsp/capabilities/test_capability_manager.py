from unittest.mock import Mock

import pytest
from lsprotocol.types import (
    CodeAction,
    CodeActionContext,
    CodeActionParams,
    CompletionItem,
    CompletionList,
    CompletionParams,
    MessageType,
    Position,
    Range,
    TextDocumentIdentifier,
)

from pragmals.lsp.capabilities.capabilities import (
    CapabilityManager,
    CodeActionCapability,
    CompletionCapability,
)


class StaticCompletion(CompletionCapability):

    def __init__(self, server, labels, handles=True):
        super().__init__(server)
        self.labels = labels
        self.handles = handles

    @property
    def name(self) -> str:
        return "static_completion"

    async def can_handle(self, params):
        return self.handles

    async def complete(self, params):
        return CompletionList(
            is_incomplete=False,
            items=[CompletionItem(label=label) for label in self.labels],
        )


class FailingCodeAction(CodeActionCapability):

    @property
    def name(self) -> str:
        return "failing"

    async def can_handle(self, params):
        return True

    async def get_code_actions(self, params):
        raise ValueError("boom")


class StaticCodeAction(CodeActionCapability):

    @property
    def name(self) -> str:
        return "static_code_action"

    async def can_handle(self, params):
        return True

    async def get_code_actions(self, params):
        return [CodeAction(title="fix it")]


@pytest.fixture
def server():
    server = Mock()
    server.window_log_message = Mock()
    return server


def completion_params() -> CompletionParams:
    return CompletionParams(
        text_document=TextDocumentIdentifier(uri="file:///a.hs"),
        position=Position(line=0, character=0),
    )


def code_action_params() -> CodeActionParams:
    zero = Position(line=0, character=0)
    return CodeActionParams(
        text_document=TextDocumentIdentifier(uri="file:///a.hs"),
        range=Range(start=zero, end=zero),
        context=CodeActionContext(diagnostics=[]),
    )


def test_default_capabilities(server):
    manager = CapabilityManager(server)

    assert set(manager.capabilities) == {"pragmas_completion", "pragmas_code_action"}
    assert len(manager.get_capabilities_by_type(CompletionCapability)) == 1
    assert len(manager.get_capabilities_by_type(CodeActionCapability)) == 1


def test_register_all_once(server):
    capability = Mock()
    manager = CapabilityManager(server, {"mock": capability})

    manager.register_all()
    manager.register_all()

    capability.register.assert_called_once()


@pytest.mark.asyncio
async def test_completion_aggregates_capable_handlers(server):
    manager = CapabilityManager(
        server,
        {
            "a": StaticCompletion(server, ["one", "two"]),
            "b": StaticCompletion(server, ["three"]),
            "c": StaticCompletion(server, ["never"], handles=False),
        },
    )
    result = await manager.handle_completion(completion_params())

    assert [item.label for item in result.items] == ["one", "two", "three"]
    assert result.is_incomplete is False


@pytest.mark.asyncio
async def test_code_action_error_is_isolated(server):
    manager = CapabilityManager(
        server,
        {"failing": FailingCodeAction(server), "static": StaticCodeAction(server)},
    )
    actions = await manager.handle_code_action(code_action_params())

    assert [a.title for a in actions] == ["fix it"]
    server.window_log_message.assert_called_once()
    logged = server.window_log_message.call_args[0][0]
    assert logged.type == MessageType.Error
    assert "failing" in logged.message
    assert "boom" in logged.message
