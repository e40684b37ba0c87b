import subprocess

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_CODE_ACTION,
    TEXT_DOCUMENT_COMPLETION,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
    CompletionList,
    CompletionParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from pragmals import __version__
from pragmals.config import Settings
from pragmals.ghc.client import GhcClient
from pragmals.lsp.capabilities.capabilities import CapabilityManager
from pragmals.lsp.pragma_language_server import PragmaLanguageServer
from pragmals.lsp.text_sync_manager import TextSyncManager
from pragmals.pragmas.catalog import PragmaCatalog


def load_catalog(ls: PragmaLanguageServer, settings: Settings) -> PragmaCatalog:
    """
    Catalog of the configured compiler, or the built-in one.

    Falls back to the built-in tables when no compiler is configured or it
    cannot be queried.
    """
    if not settings.ghc_path:
        return PragmaCatalog.default()

    client = GhcClient(settings.ghc_path)
    if not client.is_available():
        ls.window_log_message(
            LogMessageParams(
                MessageType.Warning,
                f"GHC not available at {settings.ghc_path}, using built-in pragma tables",
            )
        )
        return PragmaCatalog.default()

    try:
        catalog = PragmaCatalog.from_ghc(client)
    except (RuntimeError, OSError, subprocess.SubprocessError) as e:
        ls.window_log_message(
            LogMessageParams(
                MessageType.Error,
                f"Could not read pragma tables from {settings.ghc_path}: {e}",
            )
        )
        return PragmaCatalog.default()

    ls.window_log_message(
        LogMessageParams(
            MessageType.Info,
            f"Loaded {len(catalog.extensions)} extensions and "
            f"{len(catalog.flags)} options from GHC {client.numeric_version()}",
        )
    )
    return catalog


def create_server() -> PragmaLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle
    - Document synchronization (ls.workspace)
    """
    server = PragmaLanguageServer("pragmals", __version__)

    # Text sync goes first so the module session can register its hooks.
    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()
    server.module_session.register_text_sync_hooks()

    server.capability_manager = CapabilityManager(server)
    server.capability_manager.register_all()

    @server.feature(INITIALIZE)
    def initialize(ls: PragmaLanguageServer, params: InitializeParams):
        """
        Resolve settings and load the pragma catalog.
        """
        ls.settings = Settings.from_initialization_options(
            params.initialization_options
        )
        ls.catalog = load_catalog(ls, ls.settings)

        ls.window_log_message(
            LogMessageParams(
                MessageType.Info,
                f"pragmals ready ({len(ls.catalog.all_pragmas)} pragmas, "
                f"{len(ls.settings.default_extensions)} default extensions)",
            )
        )

    @server.feature(TEXT_DOCUMENT_COMPLETION)
    async def completion(ls: PragmaLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    @server.feature(
        TEXT_DOCUMENT_CODE_ACTION,
        CodeActionOptions(code_action_kinds=[CodeActionKind.QuickFix]),
    )
    async def code_action(ls: PragmaLanguageServer, params: CodeActionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_code_action(params)
        return []

    return server
