from enum import Enum

from .constants import HIGH_THRESHOLD, MEDIUM_THRESHOLD


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def get_severity_level(frustration_level) -> Severity:
    if frustration_level >= HIGH_THRESHOLD:
        return Severity.HIGH
    elif frustration_level >= MEDIUM_THRESHOLD:
        return Severity.MEDIUM
    else:
        return Severity.LOW


def get_action(severity: Severity) -> str:
    # Low também reporta "Notification", mesmo sem chamada externa
    return "Escalation" if severity == Severity.HIGH else "Notification"
