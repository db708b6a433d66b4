"""Unit tests for locale models."""

import pytest

from infrastructure.i18n import InvalidLocaleError, Locale
from infrastructure.operations import OperationStatus

pytestmark = pytest.mark.unit


class TestLocale:
    def test_languages(self):
        assert Locale.languages() == ["en", "ru", "ua", "pl"]

    @pytest.mark.parametrize("code,expected", [("en", Locale.ENGLISH), ("ua", Locale.UKRAINIAN)])
    def test_from_string(self, code, expected):
        assert Locale.from_string(code) is expected

    def test_from_string_accepts_locale(self):
        assert Locale.from_string(Locale.RUSSIAN) is Locale.RUSSIAN

    @pytest.mark.parametrize("code", ["fr", "EN", "", "en-US"])
    def test_unsupported_code(self, code):
        with pytest.raises(InvalidLocaleError) as exc_info:
            Locale.from_string(code)

        error = exc_info.value
        assert error.error_code == "INVALID_LOCALE"
        assert error.status == OperationStatus.VALIDATION_ERROR
        assert error.public_context() == {"locale": code, "supported": Locale.languages()}

    def test_equality_by_code(self):
        assert Locale("pl") == Locale.POLISH
        assert Locale.POLISH == "pl"

    @pytest.mark.parametrize("requested", [None, ""])
    def test_resolve_falls_back_to_default(self, requested):
        assert Locale.resolve(requested, Locale.POLISH) is Locale.POLISH

    def test_resolve_requested(self):
        assert Locale.resolve("ru", Locale.ENGLISH) is Locale.RUSSIAN

    def test_resolve_unsupported_still_fails(self):
        with pytest.raises(InvalidLocaleError):
            Locale.resolve("de", Locale.ENGLISH)
