"""Message catalog lookup for the supported locales."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from fastapi import Request

from .config import SUPPORTED_LOCALES, settings

logger = logging.getLogger(__name__)

LOCALE_DIR = Path(__file__).resolve().parent.parent / "locale"

UNKNOWN_LANGUAGE_LOCALE = "en"


@lru_cache(maxsize=None)
def load_catalog(locale: str) -> dict[str, str]:
    """Load and cache the flat ``key -> message`` catalog of one locale."""
    path = LOCALE_DIR / f"{locale}.json"
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def is_supported_locale(locale: str | None) -> bool:
    return locale in SUPPORTED_LOCALES


def translate(key: str, locale: str | None = None, **params: object) -> str:
    """
    Resolve a message key.

    Lookup order is the requested locale, the default locale, then the key
    itself, so a missing translation never breaks a response.

    Args:
        key: Dotted message key, e.g. ``tour.not_found``
        locale: Requested locale; unsupported values use the default
        **params: Values interpolated with ``str.format``

    Returns:
        str: Localized message
    """
    if not is_supported_locale(locale):
        locale = settings.default_locale

    message = load_catalog(locale).get(key)
    if message is None:
        message = load_catalog(settings.default_locale).get(key)
    if message is None:
        logger.warning("Missing translation", extra={"key": key, "locale": locale})
        return key

    return message.format(**params) if params else message


def locale_from_request(request: Request) -> str:
    """
    Locale of a request taken from its ``lang`` path segment.

    Routes without the segment use the default locale; an unsupported
    segment is answered in English.
    """
    lang = request.path_params.get("lang")
    if is_supported_locale(lang):
        return lang
    if lang is not None:
        return UNKNOWN_LANGUAGE_LOCALE
    return settings.default_locale
