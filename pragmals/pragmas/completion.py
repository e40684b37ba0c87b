"""
Completion inside ``{-# ... #-}`` pragmas.

The cursor line decides what is completed:

- ``{-# LANGUAGE`` -> extension names;
- ``{-# OPTIONS_GHC`` -> compiler options;
- any other ``{-#`` -> pragma templates.
"""

from __future__ import annotations

from dataclasses import dataclass

from lsprotocol.types import CompletionItem, CompletionItemKind, InsertTextFormat

from pragmals.pragmas.catalog import PragmaCatalog
from pragmals.pragmas.fuzzy import simple_filter
from pragmals.workspace.session import CompletionPrefix

PRAGMA_OPEN = "{-#"
LANGUAGE_OPEN = "{-# language"
OPTIONS_GHC_OPEN = "{-# options_ghc"


@dataclass(frozen=True)
class PragmaTemplate:
    """Snippet offered when typing the name of a pragma."""

    label: str
    body: str
    detail: str

    def snippet(self, suffix: str) -> str:
        return f"{self.body} #-{suffix}"


PRAGMA_TEMPLATES: tuple[PragmaTemplate, ...] = (
    PragmaTemplate("LANGUAGE", "LANGUAGE ${1:extension}", "{-# LANGUAGE #-}"),
    PragmaTemplate("OPTIONS_GHC", "OPTIONS_GHC -${1:option}", "{-# OPTIONS_GHC #-}"),
    PragmaTemplate("INLINE", "INLINE ${1:function}", "{-# INLINE #-}"),
    PragmaTemplate("NOINLINE", "NOINLINE ${1:function}", "{-# NOINLINE #-}"),
    PragmaTemplate("INLINABLE", "INLINABLE ${1:function}", "{-# INLINABLE #-}"),
    PragmaTemplate("WARNING", "WARNING ${1:message}", "{-# WARNING #-}"),
    PragmaTemplate("DEPRECATED", "DEPRECATED ${1:message}", "{-# DEPRECATED #-}"),
    PragmaTemplate("ANN", "ANN ${1:annotation}", "{-# ANN #-}"),
    PragmaTemplate("RULES", "RULES ${1:rule}", "{-# RULES #-}"),
    PragmaTemplate("SPECIALIZE", "SPECIALIZE ${1:function}", "{-# SPECIALIZE #-}"),
    PragmaTemplate(
        "SPECIALIZE INLINE",
        "SPECIALIZE INLINE ${1:function}",
        "{-# SPECIALIZE INLINE #-}",
    ),
)


def complete_pragma(
    catalog: PragmaCatalog, prefix: CompletionPrefix | None
) -> list[CompletionItem]:
    """Completion items for the cursor line, empty outside of a pragma."""
    if prefix is None:
        return []

    line = prefix.full_line
    lowered = line.lower()

    if lowered.startswith(LANGUAGE_OPEN):
        return [
            keyword_item(name)
            for name in simple_filter(prefix.prefix_text, catalog.all_pragmas)
        ]

    if lowered.startswith(OPTIONS_GHC_OPEN):
        # The typed word never includes the leading dash(es) of the option.
        return [
            keyword_item(flag)
            for flag in simple_filter(prefix.prefix_text, catalog.completion_flags)
        ]

    if line.startswith(PRAGMA_OPEN):
        # Complete without a closing brace if there already is one.
        suffix = "" if line.endswith("}") else "}"
        return [template_item(template, suffix) for template in PRAGMA_TEMPLATES]

    return []


def keyword_item(label: str) -> CompletionItem:
    return CompletionItem(label=label, kind=CompletionItemKind.Keyword)


def template_item(template: PragmaTemplate, suffix: str) -> CompletionItem:
    return CompletionItem(
        label=template.label,
        kind=CompletionItemKind.Keyword,
        detail=template.detail,
        insert_text=template.snippet(suffix),
        insert_text_format=InsertTextFormat.Snippet,
    )
