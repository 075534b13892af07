"""Internationalization System"""

import json
from pathlib import Path
from typing import Any

from shopcart.config import DEFAULT_LANGUAGE, get_language
from shopcart.logging import get_logger

logger = get_logger(__name__)

# Supported languages with their names
SUPPORTED_LANGUAGES = {
    "pt": "Português",
    "en": "English",
}

LOCALES_PATH = Path(__file__).parent / "locales"

# Cache for loaded translations
_translations: dict[str, dict[str, Any]] = {}


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = LOCALES_PATH / f"{lang}.json"

    if not file_path.exists():
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load locale {lang}: {e}")
        return {}

    _translations[lang] = data if isinstance(data, dict) else {}
    return _translations[lang]


def _lookup(translations: dict[str, Any], key: str) -> Any:
    """Resolve dot-notation keys (e.g. "errors.missing_field")."""
    current: Any = translations
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def detect_language(language_code: str | None) -> str:
    """
    Normalize a language code to a supported one.

    Args:
        language_code: e.g. "pt-BR", "en", None

    Returns:
        Supported language code, default when unknown
    """
    if not language_code:
        return DEFAULT_LANGUAGE

    # Normalize: "pt-BR" -> "pt"
    lang = language_code.split("-")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_text(key: str, lang: str | None = None, default: str | None = None, **kwargs) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key (e.g., "title", "priority.high")
        lang: Language code; SHOPCART_LANGUAGE when omitted
        default: Default value if key not found (instead of returning key)
        **kwargs: Variables to format into the string

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang or get_language())

    text = _lookup(_load_translations(lang), key)

    # Fall back to the default language
    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing or partial key
    if not isinstance(text, str):
        return default if default is not None else key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            return text

    return text


def reload_translations() -> None:
    """Clear translation cache and reload"""
    _translations.clear()
