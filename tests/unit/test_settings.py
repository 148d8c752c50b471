"""Unit tests for ResponseHelperSettings."""

import pytest

from responsehelper.config.settings import DetailsPolicy, ResponseHelperSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RESPONSEHELPER_LOG_LEVEL",
        "RESPONSEHELPER_DETAILS_POLICY",
        "RESPONSEHELPER_REDACTED_DETAILS",
        "RESPONSEHELPER_META_KEY",
        "RESPONSEHELPER_REQUEST_ID_HEADER",
    ):
        monkeypatch.delenv(name, raising=False)


class TestResponseHelperSettings:
    def test_defaults_are_correct(self):
        settings = ResponseHelperSettings()

        assert settings.log_level == "INFO"
        assert settings.details_policy is DetailsPolicy.PASS_THROUGH
        assert settings.redacted_details == "An internal error occurred"
        assert settings.meta_key == "meta"
        assert settings.request_id_header == "X-Request-ID"

    def test_env_prefix_is_responsehelper(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RESPONSEHELPER_DETAILS_POLICY", "redact")
        monkeypatch.setenv("RESPONSEHELPER_REDACTED_DETAILS", "Please retry")
        monkeypatch.setenv("RESPONSEHELPER_LOG_LEVEL", "DEBUG")

        settings = ResponseHelperSettings()

        assert settings.details_policy is DetailsPolicy.REDACT
        assert settings.redacted_details == "Please retry"
        assert settings.log_level == "DEBUG"

    def test_unknown_policy_raises(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RESPONSEHELPER_DETAILS_POLICY", "scramble")

        with pytest.raises(Exception):
            ResponseHelperSettings()

    def test_empty_placeholder_rejected(self):
        with pytest.raises(Exception):
            ResponseHelperSettings(redacted_details="")

    @pytest.mark.parametrize("meta_key", ["", "1meta", "meta-data", "with space"])
    def test_meta_key_must_be_identifier(self, meta_key):
        with pytest.raises(Exception):
            ResponseHelperSettings(meta_key=meta_key)

    def test_custom_meta_key(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RESPONSEHELPER_META_KEY", "correlation")
        assert ResponseHelperSettings().meta_key == "correlation"
