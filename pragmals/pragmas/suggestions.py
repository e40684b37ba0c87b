"""
Pragma suggestions for compiler diagnostics.

Two independent rules are applied to every diagnostic:

- missing extension: the message names an extension that is not enabled
  yet, so suggest ``{-# LANGUAGE X #-}``;
- disable warning: the diagnostic code is ``-W<name>``, so suggest
  ``{-# OPTIONS_GHC -Wno-<name> #-}``.
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from dataclasses import dataclass
from enum import Enum

from lsprotocol.types import Diagnostic

from pragmals.config import DEFAULT_WARNING_BLACKLIST
from pragmals.pragmas.catalog import PragmaCatalog
from pragmals.workspace.session import FlagsSnapshot


class PragmaKind(Enum):
    """Kind of header directive a suggestion inserts."""

    LANGUAGE = "LANGUAGE"
    OPTIONS_GHC = "OPTIONS_GHC"


@dataclass(frozen=True)
class Pragma:
    """A single header directive, e.g. ``LANGUAGE TupleSections``."""

    kind: PragmaKind
    name: str

    def render(self) -> str:
        """Directive line to insert, newline terminated."""
        if self.kind is PragmaKind.OPTIONS_GHC:
            return f"{{-# OPTIONS_GHC -Wno-{self.name} #-}}\n"
        return f"{{-# LANGUAGE {self.name} #-}}\n"


@dataclass(frozen=True)
class PragmaEdit:
    """Title shown in the editor and the pragma it adds."""

    title: str
    pragma: Pragma


def suggest_add_pragma(
    catalog: PragmaCatalog,
    flags: FlagsSnapshot | None,
    diagnostic: Diagnostic,
) -> list[PragmaEdit]:
    """
    Offer to add a missing LANGUAGE pragma to the top of a file.

    When the module failed to parse there is no flags snapshot; in that
    case no extension counts as enabled.
    """
    enabled = flags.enabled if flags is not None else frozenset()
    return [
        PragmaEdit(f'Add "{name}"', Pragma(PragmaKind.LANGUAGE, name))
        for name in find_pragmas(catalog, diagnostic.message)
        if name not in enabled
    ]


def find_pragmas(catalog: PragmaCatalog, text: str) -> list[str]:
    """All suggestible extension names that occur anywhere in ``text``."""
    # Plain substring containment: a message mentioning
    # "TemplateHaskellQuotes" matches "TemplateHaskell" too.
    return [name for name in catalog.possible_pragmas if name in text]


def suggest_disable_warning(
    diagnostic: Diagnostic,
    blacklist: Set[str] = frozenset(DEFAULT_WARNING_BLACKLIST),
) -> list[PragmaEdit]:
    """Offer ``-Wno-<name>`` for diagnostics whose code is ``-W<name>``."""
    code = diagnostic.code
    if not isinstance(code, str) or not code.startswith("-W"):
        return []

    warning = code[len("-W"):]
    if warning in blacklist:
        return []

    return [
        PragmaEdit(
            f'Disable "{warning}" warnings',
            Pragma(PragmaKind.OPTIONS_GHC, warning),
        )
    ]


def suggest(
    catalog: PragmaCatalog,
    flags: FlagsSnapshot | None,
    diagnostic: Diagnostic,
    blacklist: Set[str] = frozenset(DEFAULT_WARNING_BLACKLIST),
) -> list[PragmaEdit]:
    """Both rules for one diagnostic, extension suggestions first."""
    return suggest_add_pragma(catalog, flags, diagnostic) + suggest_disable_warning(
        diagnostic, blacklist
    )


def suggest_all(
    catalog: PragmaCatalog,
    flags: FlagsSnapshot | None,
    diagnostics: Iterable[Diagnostic],
    blacklist: Set[str] = frozenset(DEFAULT_WARNING_BLACKLIST),
) -> list[PragmaEdit]:
    """
    Suggestions for every diagnostic of a request.

    Edits adding the same pragma are collapsed; the first one wins.
    """
    seen: set[Pragma] = set()
    edits: list[PragmaEdit] = []
    for diagnostic in diagnostics:
        for edit in suggest(catalog, flags, diagnostic, blacklist):
            if edit.pragma in seen:
                continue
            seen.add(edit.pragma)
            edits.append(edit)
    return edits
