from typing import Any

from .classification import Severity, get_action, get_severity_level
from .client import HTTPClient
from .constants import DEBUG_MODE, ESCALATION_PATH, NOTIFICATION_PATH
from .exceptions import EscalationError, NotificationError


def escalate_to_support_team(client: HTTPClient, customer_id: str, interaction_details: Any):
    if DEBUG_MODE:
        print(f"[DEBUG] Escalando para o time de suporte: customer={customer_id} details={interaction_details}")

    payload = {
        "customerId": customer_id,
        "interactionDetails": interaction_details,
        "urgency": Severity.HIGH.value,
    }
    try:
        resp = client.post(ESCALATION_PATH, payload)
    except Exception as exc:
        print(f"[ERROR] Erro ao escalonar para o time de suporte: {exc}")
        raise EscalationError("Failed to escalate alert to support team") from exc

    if DEBUG_MODE:
        print(f"[DEBUG] Escalonamento concluído: {resp}")
    return resp


def send_notification_to_manager(client: HTTPClient, customer_id: str, interaction_details: Any):
    if DEBUG_MODE:
        print(f"[DEBUG] Notificando gerente: customer={customer_id} details={interaction_details}")

    payload = {
        "customerId": customer_id,
        "interactionDetails": interaction_details,
        "severity": Severity.MEDIUM.value,
    }
    try:
        resp = client.post(NOTIFICATION_PATH, payload)
    except Exception as exc:
        print(f"[ERROR] Erro ao notificar gerente: {exc}")
        raise NotificationError("Failed to send notification to manager") from exc

    if DEBUG_MODE:
        print(f"[DEBUG] Notificação enviada: {resp}")
    return resp


def handle_frustration_alert(client: HTTPClient, customer_id: str, interaction_details: Any, frustration_level):
    """Classifica o nível de frustração e decide entre escalonamento, notificação ou nada.

    Retorna {"severity": ..., "action": ...}. Erros de despacho são propagados
    como DispatchError para o controller responder 500.
    """
    severity = get_severity_level(frustration_level)
    print(f"[INFO] Cliente {customer_id} reportou frustração {frustration_level} (severidade: {severity.value})")

    if severity == Severity.HIGH:
        escalate_to_support_team(client, customer_id, interaction_details)
    elif severity == Severity.MEDIUM:
        send_notification_to_manager(client, customer_id, interaction_details)

    return {"severity": severity.value, "action": get_action(severity)}
