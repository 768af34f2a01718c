"""Old English language module."""
from .module import OldEnglishModule
from .words import Word, NumberForm
from .declension import Declension, DeclensionRegistry

__all__ = ["OldEnglishModule", "Word", "NumberForm", "Declension", "DeclensionRegistry"]
