"""Testes para app/infra/dns/mx_resolver.py.

O resolver do dnspython é mockado: nenhum teste faz consulta real.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import dns.exception
import dns.resolver
import pytest

from app.infra.dns import DnsMxResolver


def _mx(exchange: str) -> SimpleNamespace:
    return SimpleNamespace(preference=10, exchange=exchange)


def _resolver_with(answers: dict[str, object]) -> MagicMock:
    """Resolver fake: answers mapeia tipo de registro → lista ou exceção."""
    resolver = MagicMock(spec=dns.resolver.Resolver)

    def resolve(domain: str, record_type: str):
        outcome = answers.get(record_type, dns.resolver.NoAnswer())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    resolver.resolve.side_effect = resolve
    return resolver


class TestHasMailExchanger:
    """Testes de has_mail_exchanger."""

    def test_domain_with_mx(self) -> None:
        resolver = _resolver_with({"MX": [_mx("gmail-smtp-in.l.google.com.")]})
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger("gmail.com") is True
        resolver.resolve.assert_called_once_with("gmail.com", "MX")

    def test_null_mx_rejected(self) -> None:
        resolver = _resolver_with({"MX": [_mx(".")], "A": ["127.0.0.1"]})
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger("nomail.example") is False

    def test_nxdomain_stops_lookup(self) -> None:
        resolver = _resolver_with({"MX": dns.resolver.NXDOMAIN(), "A": ["127.0.0.1"]})
        result = DnsMxResolver(resolver=resolver).has_mail_exchanger("doe.shouldneverexist")
        assert result is False
        resolver.resolve.assert_called_once()

    def test_fallback_to_a_record(self) -> None:
        resolver = _resolver_with({"MX": dns.resolver.NoAnswer(), "A": ["93.184.216.34"]})
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger("a-only.com") is True

    def test_fallback_to_aaaa_record(self) -> None:
        resolver = _resolver_with({"AAAA": ["2001:db8::1"]})
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger("v6-only.com") is True

    def test_fallback_disabled(self) -> None:
        resolver = _resolver_with({"A": ["93.184.216.34"]})
        mx_resolver = DnsMxResolver(resolver=resolver, fallback_to_a_record=False)
        assert mx_resolver.has_mail_exchanger("a-only.com") is False

    def test_timeout_counts_as_failure(self) -> None:
        resolver = _resolver_with(
            {
                "MX": dns.exception.Timeout(),
                "A": dns.exception.Timeout(),
                "AAAA": dns.exception.Timeout(),
            }
        )
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger("slow.com") is False

    def test_no_nameservers_counts_as_failure(self) -> None:
        resolver = _resolver_with({"MX": dns.resolver.NoNameservers()})
        mx_resolver = DnsMxResolver(resolver=resolver, fallback_to_a_record=False)
        assert mx_resolver.has_mail_exchanger("broken.com") is False

    @pytest.mark.parametrize("domain", ["", "   ", ".", "a..b"])
    def test_invalid_domain_without_lookup(self, domain) -> None:
        resolver = _resolver_with({})
        assert DnsMxResolver(resolver=resolver).has_mail_exchanger(domain) is False
        resolver.resolve.assert_not_called()

    def test_domain_normalized(self) -> None:
        resolver = _resolver_with({"MX": [_mx("mx.gmail.com.")]})
        DnsMxResolver(resolver=resolver).has_mail_exchanger(" Gmail.COM. ")
        resolver.resolve.assert_called_once_with("gmail.com", "MX")


class TestResolverConstruction:
    def test_explicit_nameservers_and_timeout(self, monkeypatch) -> None:
        created = MagicMock()
        factory = MagicMock(return_value=created)
        monkeypatch.setattr(dns.resolver, "Resolver", factory)

        mx_resolver = DnsMxResolver(timeout_seconds=2.5, nameservers=("1.1.1.1",))
        created.resolve.side_effect = dns.resolver.NXDOMAIN()
        mx_resolver.has_mail_exchanger("gmail.com")

        factory.assert_called_once_with(configure=False)
        assert created.nameservers == ["1.1.1.1"]
        assert created.lifetime == 2.5
        assert created.timeout == 2.5

    def test_resolver_created_lazily_once(self, monkeypatch) -> None:
        created = MagicMock()
        created.resolve.side_effect = dns.resolver.NXDOMAIN()
        factory = MagicMock(return_value=created)
        monkeypatch.setattr(dns.resolver, "Resolver", factory)

        mx_resolver = DnsMxResolver()
        factory.assert_not_called()

        mx_resolver.has_mail_exchanger("a.com")
        mx_resolver.has_mail_exchanger("b.com")

        factory.assert_called_once_with(configure=True)
