"""Language module registry - factory pattern for language support."""
from core.errors import not_found, raise_error
from .base import LanguageModule

_MODULES: dict[str, LanguageModule] = {}


def register(module: LanguageModule) -> None:
    """Register a language module."""
    _MODULES[module.code] = module


def get_module(code: str) -> LanguageModule:
    """Get a language module by code. Raises NotFoundError if unregistered."""
    if code not in _MODULES:
        raise_error(not_found("Language", code, origin="languages.registry").error)
    return _MODULES[code]


def list_languages() -> list[dict]:
    """List all registered languages."""
    return [{"code": m.code, "name": m.name, "nativeName": m.native_name} for m in _MODULES.values()]


def _auto_register() -> None:
    """Auto-register language modules on import."""
    from .old_english import OldEnglishModule
    register(OldEnglishModule())


_auto_register()
