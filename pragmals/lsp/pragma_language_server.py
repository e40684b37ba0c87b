from pygls.lsp.server import LanguageServer

from pragmals.config import Settings
from pragmals.lsp.capabilities.capabilities import CapabilityManager
from pragmals.lsp.text_sync_manager import TextSyncManager
from pragmals.pragmas.catalog import PragmaCatalog
from pragmals.workspace.session import ModuleSession


class PragmaLanguageServer(LanguageServer):
    """
    Custom Language Server with pragma-specific attributes.

    Attributes:
        settings: Configuration resolved at initialize.
        catalog: Extension and option names known to the compiler.
        module_session: Documents and their extension snapshots.
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version)

        self.settings = Settings()
        self.catalog = PragmaCatalog.default()
        self.module_session = ModuleSession(self)
        self.capability_manager: CapabilityManager | None = None
        self.text_sync_manager: TextSyncManager | None = None
