"""
LSP Capabilities Manager

This module manages the LSP feature handlers (completion, code actions)
using a plugin architecture.

Design Principles:
1. Plugin-based (add capabilities without modifying core)
2. Type-safe (abstract base class)
3. Composable (multiple handlers for same feature)
4. Testable (isolated capability handlers)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CodeAction,
    CodeActionParams,
    CompletionItem,
    CompletionList,
    CompletionParams,
    LogMessageParams,
    MessageType,
)


if TYPE_CHECKING:
    from pragmals.lsp.pragma_language_server import PragmaLanguageServer


class Capability(ABC):
    """
    Base class for all LSP capability handlers.

    Each capability can handle one or more LSP features (completion, code
    actions) and decides whether it can handle a specific request based on
    context.
    """

    def __init__(self, server: PragmaLanguageServer) -> None:
        self.server = server

    def register(self) -> None:
        """
        Register extra hooks with the server.

        This is called once during server initialization.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @abstractmethod
    async def can_handle(self, params) -> bool:
        """Check if the capability can handle the request."""
        pass


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def can_handle(self, params: CompletionParams) -> bool:
        """
        Check if this capability can handle the completion request.

        Returns True if this capability should provide completions
        for the current context.
        """
        pass

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Provide completion items.

        Only called if can_handle() returns True.
        """
        pass


class CodeActionCapability(Capability):
    """Base class for code action capabilities."""

    @abstractmethod
    async def can_handle(self, params: CodeActionParams) -> bool:
        """Check if this capability can handle the code action request."""
        pass

    @abstractmethod
    async def get_code_actions(
        self, params: CodeActionParams
    ) -> list[CodeAction]:
        """Return available code actions for the given context."""
        pass


class CapabilityManager:
    """
    Central manager for all LSP capabilities.

    Usage:
        # In server initialization
        manager = CapabilityManager(server)
        manager.register_all()
    """

    def __init__(
        self,
        server: PragmaLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from pragmals.lsp.capabilities.pragmas_capabilities import (
                PragmasCodeActionCapability,
                PragmasCompletionCapability,
            )

            capabilities = {
                "pragmas_completion": PragmasCompletionCapability(server),
                "pragmas_code_action": PragmasCodeActionCapability(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(self, params: CompletionParams) -> CompletionList:
        """
        Handle completion requests by delegating to capable handlers.

        This aggregates results from all completion capabilities that
        can handle the request.
        """
        all_items: list[CompletionItem] = []

        for capability in self.get_capabilities_by_type(CompletionCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.complete(params)  # pyright: ignore
                    all_items.extend(result.items)
            except Exception as e:
                self._log_error(f"Completion error in {capability.name}: {e}")

        return CompletionList(is_incomplete=False, items=all_items)

    async def handle_code_action(
        self, params: CodeActionParams
    ) -> list[CodeAction]:
        """Aggregate code actions from all capable handlers."""
        all_actions: list[CodeAction] = []

        for capability in self.get_capabilities_by_type(CodeActionCapability):
            try:
                if await capability.can_handle(params):
                    actions = await capability.get_code_actions(params)  # pyright: ignore
                    all_actions.extend(actions)
            except Exception as e:
                self._log_error(f"Code action error in {capability.name}: {e}")

        return all_actions

    def _log_error(self, message: str) -> None:
        self.server.window_log_message(
            LogMessageParams(type=MessageType.Error, message=message)
        )
