"""Unit tests for message localization."""

import json

import pytest

from tourism_api.core import i18n
from tourism_api.core.i18n import LOCALE_DIR, is_supported_locale, load_catalog, translate


@pytest.mark.parametrize("locale", ["ru", "en", "ky"])
def test_supported_locales(locale):
    """Test that the three languages are supported."""
    assert is_supported_locale(locale)


@pytest.mark.parametrize("locale", ["de", "", None, "EN"])
def test_unsupported_locales(locale):
    """Test that other values are not supported."""
    assert not is_supported_locale(locale)


def test_translate_uses_requested_locale():
    """Test that a message is returned in the requested language."""
    assert translate("tour.not_found", "en") == "Tour not found"
    assert translate("tour.not_found", "ru") != "Tour not found"


def test_missing_key_in_locale_falls_back_to_default(monkeypatch):
    """Test that keys missing from a catalog use the default locale."""
    full_load = load_catalog

    def without_item_updated(locale):
        catalog = dict(full_load(locale))
        if locale == "ky":
            catalog.pop("itinerary.item_updated")
        return catalog

    monkeypatch.setattr(i18n, "load_catalog", without_item_updated)

    assert translate("itinerary.item_updated", "ky") == translate("itinerary.item_updated", "ru")


def test_unknown_key_returns_key():
    """Test that an unknown key is returned unchanged."""
    assert translate("no.such.key", "en") == "no.such.key"


def test_unsupported_locale_uses_default():
    """Test that an unsupported locale falls back to the default one."""
    assert translate("tour.not_found", "de") == translate("tour.not_found", "ru")


@pytest.mark.parametrize("locale", ["ru", "ky"])
def test_catalogs_have_same_keys_as_english(locale):
    """Test that every catalog defines the same messages."""
    with open(LOCALE_DIR / "en.json", encoding="utf-8") as fh:
        en = json.load(fh)
    with open(LOCALE_DIR / f"{locale}.json", encoding="utf-8") as fh:
        other = json.load(fh)

    assert set(other) == set(en)


@pytest.mark.parametrize("key", ["favorite.tour_not_found", "itinerary.day_not_found", "car.invalid_tour"])
def test_kyrgyz_messages_differ_from_russian(key):
    """Test that Kyrgyz responses do not reuse the Russian text."""
    assert translate(key, "ky") != translate(key, "ru")
