"""
Pragma catalog.

Read-only tables of the extension and option names known to the compiler.
A catalog is built once at startup and shared by every request.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from pragmals.pragmas import ghc_tables

if TYPE_CHECKING:
    from pragmals.ghc.client import GhcClient


# Extensions never suggested from diagnostic messages. "Strict" is a
# substring of many unrelated messages (StrictData, strictness, ...).
EXCLUDED_SUGGESTIONS: frozenset[str] = frozenset({"Strict"})


@dataclass(frozen=True)
class PragmaCatalog:
    """
    Known compiler extension and option names.

    Attributes:
        extensions: Reversible extension names, without the ``No`` variants.
        flags: Compiler option names, leading dash included.
    """

    extensions: tuple[str, ...]
    flags: tuple[str, ...]

    @classmethod
    def default(cls) -> PragmaCatalog:
        """The built-in tables."""
        return cls(
            extensions=ghc_tables.EXTENSIONS,
            flags=ghc_tables.default_flags(),
        )

    @classmethod
    def from_ghc(cls, client: GhcClient) -> PragmaCatalog:
        """
        Build the catalog from an installed compiler.

        ``--supported-extensions`` lists both ``X`` and ``NoX``; only names
        whose negation is listed as well count as reversible extensions.

        Raises:
            RuntimeError: If the compiler cannot be queried.
        """
        supported = client.supported_extensions()
        names = set(supported)
        extensions = tuple(
            name
            for name in supported
            if f"No{name}" in names and name not in ghc_tables.NON_REVERSIBLE_PRAGMAS
        )
        flags = tuple(option for option in client.show_options() if option.startswith("-"))
        if not extensions or not flags:
            raise RuntimeError(f"{client.ghc_path} reported an empty catalog")
        return cls(extensions=extensions, flags=flags)

    @cached_property
    def possible_pragmas(self) -> tuple[str, ...]:
        """
        Extension names that may be suggested from a diagnostic message.

        The ``No`` variants are left out since GHC never suggests disabling
        an extension in an error message.
        """
        return tuple(
            name for name in self.extensions if name not in EXCLUDED_SUGGESTIONS
        )

    @cached_property
    def all_pragmas(self) -> tuple[str, ...]:
        """All LANGUAGE pragma names, including the ``No`` variants."""
        names: list[str] = []
        for name in self.extensions:
            names.append(name)
            names.append(f"No{name}")
        names.extend(ghc_tables.NON_REVERSIBLE_PRAGMAS)
        return tuple(names)

    @cached_property
    def completion_flags(self) -> tuple[str, ...]:
        """Option names as typed after ``OPTIONS_GHC -``."""
        return tuple(strip_leading("-", flag) for flag in self.flags)


def strip_leading(char: str, text: str) -> str:
    """Drop a single leading ``char`` from ``text``."""
    return text[1:] if text.startswith(char) else text
