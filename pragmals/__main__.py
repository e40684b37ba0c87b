"""
Main entry point for the pragma language server.

This file is executed when running: python -m pragmals

The server communicates with editors via stdin/stdout using JSON-RPC.
"""
import os
import sys

from pragmals.lsp.server import create_server


def main():
    """Start the language server on stdin/stdout."""

    # stdout carries the protocol, so debug chatter goes to stderr.
    if os.getenv("DEBUG"):
        import debugpy

        print("pragmals starting in DEBUG mode, waiting for debugger on port 5678", file=sys.stderr)
        debugpy.listen(("127.0.0.1", 5678))
        debugpy.wait_for_client()

    server = create_server()

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()


if __name__ == "__main__":
    main()
