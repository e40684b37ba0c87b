"""Document and module state for the pragma server."""
from .session import DocumentSnapshot, FlagsSnapshot, ModuleSession

__all__ = ['DocumentSnapshot', 'FlagsSnapshot', 'ModuleSession']
