import os

from dotenv import load_dotenv

load_dotenv()

# Configurações globais de ambiente
DEVREV_ACCESS_TOKEN = os.getenv("DEVREV_ACCESS_TOKEN")
DEVREV_ENDPOINT = os.getenv("DEVREV_ENDPOINT", "https://example.endpoint.devrev.ai")
DEVREV_VERIFY_TLS = os.getenv("DEVREV_VERIFY_TLS", "true").lower() == "true"
APP_PORT = int(os.getenv("PORT", "3000"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

SERVICE_NAME = "Customer Frustration Alerting System"

# Limiares de severidade (inclusivos)
HIGH_THRESHOLD = 8
MEDIUM_THRESHOLD = 5

# Rotas dos serviços externos
ESCALATION_PATH = "/support/escalate"
NOTIFICATION_PATH = "/notifications/manager"

INVALID_REQUEST_MESSAGE = (
    "Invalid request format: customerId, interactionDetails, and frustrationLevel are required."
)
INVALID_LEVEL_MESSAGE = "Invalid request format: frustrationLevel must be a number."
INVALID_CUSTOMER_MESSAGE = "Invalid request format: customerId must be a string."
