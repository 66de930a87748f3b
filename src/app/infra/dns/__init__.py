"""DNS — verificação de domínios de e-mail via dnspython."""

from __future__ import annotations

from app.infra.dns.mx_resolver import DnsMxResolver

__all__ = ["DnsMxResolver"]
