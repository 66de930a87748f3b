"""Testes para os eventos (base, validação de e-mail, conteúdo customizado)."""

from __future__ import annotations

from app.events import CustomContentEvent, EmailValidationEvent, Event


class TestEvent:
    def test_propagation_not_stopped_by_default(self) -> None:
        assert Event().is_propagation_stopped() is False

    def test_stop_propagation_is_per_instance(self) -> None:
        stopped, other = Event(), Event()
        stopped.stop_propagation()
        assert stopped.is_propagation_stopped() is True
        assert other.is_propagation_stopped() is False


class TestEmailValidationEvent:
    def test_starts_valid(self) -> None:
        event = EmailValidationEvent("john@gmail.com")
        assert event.address == "john@gmail.com"
        assert event.is_valid() is True
        assert event.invalid_reason is None

    def test_set_invalid_records_reason(self) -> None:
        event = EmailValidationEvent("bad@gmail.com")
        event.set_invalid("bad email")
        assert event.is_valid() is False
        assert event.invalid_reason == "bad email"


class TestCustomContentEvent:
    def test_check_context(self) -> None:
        event = CustomContentEvent("page", "head")
        assert event.check_context("page", "head") is True
        assert event.check_context("page", "footer") is False
        assert event.check_context("other", "head") is False

    def test_content_and_templates_accumulate(self) -> None:
        event = CustomContentEvent("page", variables={"a": 1})
        event.add_content("x")
        event.add_content("y")
        event.add_template("t.html", {"b": 2})
        event.add_template("u.html")

        assert event.content == ["x", "y"]
        assert event.templates == [("t.html", {"b": 2}), ("u.html", {})]

    def test_accessors_return_copies(self) -> None:
        event = CustomContentEvent("page")
        event.content.append("leak")
        assert event.content == []
