"""
Server settings.

Settings are resolved once, when the client sends ``initialize``:
``initializationOptions`` take precedence over environment variables,
which take precedence over the built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_WARNING_BLACKLIST: tuple[str, ...] = (
    # Don't suggest disabling type errors as a solution to all type errors
    "deferred-type-errors",
)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration of the pragma server."""

    ghc_path: str | None = None
    default_extensions: frozenset[str] = field(default_factory=frozenset)
    warning_blacklist: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_WARNING_BLACKLIST)
    )

    @classmethod
    def from_initialization_options(
        cls,
        options: Any,
        environ: Mapping[str, str] | None = None,
    ) -> Settings:
        """
        Build settings from the client's ``initializationOptions``.

        Args:
            options: Raw initialization options. Anything but a mapping
                     (None, a list, a string) counts as no options.
            environ: Environment to read fallbacks from. Defaults to os.environ.

        Recognised keys: ``ghcPath``, ``defaultExtensions``, ``warningBlacklist``.
        """
        if not isinstance(options, Mapping):
            options = {}
        environ = os.environ if environ is None else environ

        ghc_path = options.get("ghcPath") or environ.get("PRAGMALS_GHC") or None

        default_extensions = frozenset(
            str(ext) for ext in options.get("defaultExtensions") or ()
        )

        blacklist = options.get("warningBlacklist")
        if blacklist is None:
            warning_blacklist = frozenset(DEFAULT_WARNING_BLACKLIST)
        else:
            warning_blacklist = frozenset(str(name) for name in blacklist)

        return cls(
            ghc_path=ghc_path,
            default_extensions=default_extensions,
            warning_blacklist=warning_blacklist,
        )
