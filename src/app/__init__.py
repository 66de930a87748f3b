"""App — serviços, eventos e infraestrutura do mailguard.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- constants/: nomes de eventos
- events/: eventos e EventDispatcher síncrono
- listeners/: subscribers registrados no dispatcher
- services/: EmailValidator e ContentHelper
- infra/: implementações concretas de IO (DNS, i18n, templates)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs
- templates/: templates de conteúdo customizado

Padrão: services dependem de protocols; bootstrap escolhe a infra.
"""
