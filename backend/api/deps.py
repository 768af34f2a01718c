"""Shared FastAPI dependencies."""
from core.config import settings
from languages import LanguageModule, get_module


def get_language_module() -> LanguageModule:
    """Language module that serves declensions, scenarios and sessions."""
    return get_module(settings.DEFAULT_LANGUAGE)
