"""Testes para app/bootstrap (wiring e validação de startup)."""

from __future__ import annotations

import pytest

from app.bootstrap import (
    get_content_helper,
    get_email_validator,
    get_event_dispatcher,
    get_translator,
    reset_singletons,
    validate_runtime_settings,
)
from app.bootstrap.dependencies import create_event_dispatcher, create_email_validator
from app.constants.events import EmailEvents
from app.infra.i18n import YamlTranslator
from app.services import ContentHelper, EmailValidator
from config.settings import EmailValidationSettings
from utils.errors import InvalidEmailError


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    for name in ("ENVIRONMENT", "EMAIL_DENIED_DOMAINS", "EMAIL_DNS_TIMEOUT_SECONDS", "CONTENT_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    reset_singletons()
    yield
    reset_singletons()


class TestGetters:
    def test_wiring(self) -> None:
        assert isinstance(get_translator(), YamlTranslator)
        assert isinstance(get_email_validator(), EmailValidator)
        assert isinstance(get_content_helper(), ContentHelper)

    def test_singletons(self) -> None:
        assert get_event_dispatcher() is get_event_dispatcher()
        assert get_email_validator() is get_email_validator()

    def test_reset_singletons(self) -> None:
        first = get_event_dispatcher()
        reset_singletons()
        assert get_event_dispatcher() is not first

    def test_validator_uses_configured_locale(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_LOCALE", "pt_BR")
        reset_singletons()
        with pytest.raises(InvalidEmailError) as exc_info:
            get_email_validator().validate("john@doe")
        assert exc_info.value.message == get_translator().trans("mailguard.email.address.invalid")
        assert exc_info.value.message != "mailguard.email.address.invalid"

    def test_denylist_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("EMAIL_DENIED_DOMAINS", "mailinator.com")
        reset_singletons()
        with pytest.raises(InvalidEmailError, match="mailinator.com"):
            get_email_validator().validate("john@mailinator.com")


class TestDependencies:
    def test_dispatcher_without_denylist_has_no_listeners(self, fake_translator) -> None:
        dispatcher = create_event_dispatcher(fake_translator, EmailValidationSettings())
        assert not dispatcher.has_listeners(EmailEvents.ON_EMAIL_VALIDATION)

    def test_dispatcher_with_denylist(self, fake_translator) -> None:
        dispatcher = create_event_dispatcher(
            fake_translator, EmailValidationSettings(denied_domains=("mailinator.com",))
        )
        assert dispatcher.has_listeners(EmailEvents.ON_EMAIL_VALIDATION)

    def test_validator_check_dns_default(self, fake_translator, fake_resolver) -> None:
        dispatcher = create_event_dispatcher(fake_translator, EmailValidationSettings())
        validator = create_email_validator(
            fake_translator, dispatcher, fake_resolver, EmailValidationSettings(check_dns=True)
        )
        validator.validate("john@gmail.com")
        assert fake_resolver.lookups == ["gmail.com"]


class TestValidateRuntimeSettings:
    def test_valid_settings_pass(self) -> None:
        validate_runtime_settings()

    def test_strict_environment_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("EMAIL_DNS_TIMEOUT_SECONDS", "0")
        reset_singletons()
        with pytest.raises(RuntimeError, match="EMAIL_DNS_TIMEOUT_SECONDS"):
            validate_runtime_settings()

    def test_development_only_warns(self, monkeypatch) -> None:
        monkeypatch.setenv("EMAIL_DNS_TIMEOUT_SECONDS", "0")
        reset_singletons()
        validate_runtime_settings()
