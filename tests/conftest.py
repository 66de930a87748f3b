"""Configuração do pytest para o projeto mailguard."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def fake_translator():
    from tests.fakes.fake_translator import FakeTranslator

    return FakeTranslator()


@pytest.fixture
def fake_resolver():
    from tests.fakes.fake_domain_resolver import FakeDomainResolver

    return FakeDomainResolver({"gmail.com", "mail.email"})
