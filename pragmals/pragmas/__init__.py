"""Pragma suggestions and completions for GHC source files."""
from .catalog import PragmaCatalog
from .completion import complete_pragma
from .insertion import next_pragma_position
from .suggestions import Pragma, PragmaEdit, PragmaKind, suggest_all

__all__ = [
    'PragmaCatalog',
    'Pragma',
    'PragmaEdit',
    'PragmaKind',
    'complete_pragma',
    'next_pragma_position',
    'suggest_all',
]
