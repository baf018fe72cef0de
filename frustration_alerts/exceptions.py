"""Erros de despacho para os serviços externos."""


class DispatchError(Exception):
    """Falha ao encaminhar um alerta para um serviço externo."""


class EscalationError(DispatchError):
    """Falha ao escalonar para o time de suporte."""


class NotificationError(DispatchError):
    """Falha ao notificar o gerente."""
