import math

from flask import Flask, request

from .client import HTTPClient
from .constants import (
    APP_PORT,
    DEBUG_MODE,
    DEVREV_ACCESS_TOKEN,
    DEVREV_ENDPOINT,
    DEVREV_VERIFY_TLS,
    INVALID_CUSTOMER_MESSAGE,
    INVALID_LEVEL_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    SERVICE_NAME,
)
from .exceptions import DispatchError
from .services import handle_frustration_alert


def _is_missing(value):
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN e Infinity chegam como float pelo parser JSON do Flask
    return math.isfinite(value)


def create_app(access_token=None, endpoint=None, client=None):
    token = access_token or DEVREV_ACCESS_TOKEN
    if not token:
        raise RuntimeError("DEVREV_ACCESS_TOKEN is not defined in the environment or .env file.")

    app = Flask(__name__)
    # Um cliente por processo; guarda apenas configuração imutável
    devrev_client = client or HTTPClient(
        endpoint=endpoint or DEVREV_ENDPOINT,
        token=token,
        verify_tls=DEVREV_VERIFY_TLS,
    )

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'message': f'{SERVICE_NAME} is healthy'}, 200

    @app.route('/frustration-alert', methods=['POST'])
    def frustration_alert():
        data = request.get_json(silent=True)
        if DEBUG_MODE:
            print(f"[DEBUG] Received data: {data}")

        if not isinstance(data, dict):
            return {'message': INVALID_REQUEST_MESSAGE}, 400

        customer_id = data.get('customerId')
        interaction_details = data.get('interactionDetails')
        frustration_level = data.get('frustrationLevel')

        if _is_missing(customer_id) or _is_missing(interaction_details) or frustration_level is None:
            return {'message': INVALID_REQUEST_MESSAGE}, 400
        if not isinstance(customer_id, str):
            return {'message': INVALID_CUSTOMER_MESSAGE}, 400
        if not _is_number(frustration_level):
            return {'message': INVALID_LEVEL_MESSAGE}, 400

        print(f"[INFO] Alerta de frustração recebido: customer={customer_id} level={frustration_level}")

        try:
            result = handle_frustration_alert(devrev_client, customer_id, interaction_details, frustration_level)
        except DispatchError as exc:
            print(f"[ERROR] Erro ao processar alerta de frustração: {exc}")
            return {'message': 'Internal Server Error'}, 500

        return {
            'message': 'Frustration alert processed successfully.',
            'severity': result['severity'],
            'action': result['action'],
        }, 200

    print(f"[INFO] {SERVICE_NAME} pronto na porta {APP_PORT}")
    return app
