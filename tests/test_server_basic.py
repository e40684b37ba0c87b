"""
Basic tests for the pragma language server.

These tests verify that the server can be created and has the expected features registered.
"""

from unittest.mock import Mock, patch

from lsprotocol.types import (
    TEXT_DOCUMENT_CODE_ACTION,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    MessageType,
)

from pragmals.config import Settings
from pragmals.lsp.server import create_server, load_catalog
from pragmals.pragmas.catalog import PragmaCatalog


def test_server_creation():
    """Test that the server can be created successfully."""
    server = create_server()
    assert server is not None
    assert server.name == "pragmals"
    assert server.version == "0.1.0"


def test_server_has_completion_feature():
    server = create_server()
    assert TEXT_DOCUMENT_COMPLETION in server.protocol.fm._features


def test_server_has_code_action_feature():
    server = create_server()
    assert TEXT_DOCUMENT_CODE_ACTION in server.protocol.fm._features


def test_server_has_text_sync_features():
    server = create_server()
    assert TEXT_DOCUMENT_DID_OPEN in server.protocol.fm._features
    assert TEXT_DOCUMENT_DID_CHANGE in server.protocol.fm._features


def test_server_defaults():
    server = create_server()
    assert server.settings == Settings()
    assert server.catalog == PragmaCatalog.default()
    assert server.capability_manager is not None


class TestLoadCatalog:

    def test_builtin_without_ghc(self):
        ls = Mock()
        assert load_catalog(ls, Settings()) == PragmaCatalog.default()
        ls.window_log_message.assert_not_called()

    @patch("pragmals.lsp.server.GhcClient")
    def test_missing_ghc_falls_back(self, client_class):
        client_class.return_value.is_available.return_value = False
        ls = Mock()

        catalog = load_catalog(ls, Settings(ghc_path="/opt/ghc/bin/ghc"))

        assert catalog == PragmaCatalog.default()
        logged = ls.window_log_message.call_args[0][0]
        assert logged.type == MessageType.Warning

    @patch("pragmals.lsp.server.GhcClient")
    def test_failing_ghc_falls_back(self, client_class):
        client = client_class.return_value
        client.is_available.return_value = True
        client.supported_extensions.side_effect = RuntimeError("ghc crashed")
        ls = Mock()

        catalog = load_catalog(ls, Settings(ghc_path="ghc"))

        assert catalog == PragmaCatalog.default()
        logged = ls.window_log_message.call_args[0][0]
        assert logged.type == MessageType.Error
        assert "ghc crashed" in logged.message

    @patch("pragmals.lsp.server.GhcClient")
    def test_catalog_from_ghc(self, client_class):
        client = client_class.return_value
        client.ghc_path = "ghc"
        client.is_available.return_value = True
        client.supported_extensions.return_value = ["GADTs", "NoGADTs"]
        client.show_options.return_value = ["-Wall"]
        client.numeric_version.return_value = "9.4.8"
        ls = Mock()

        catalog = load_catalog(ls, Settings(ghc_path="ghc"))

        assert catalog == PragmaCatalog(extensions=("GADTs",), flags=("-Wall",))
        logged = ls.window_log_message.call_args[0][0]
        assert "9.4.8" in logged.message
