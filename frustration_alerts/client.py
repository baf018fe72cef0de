from typing import Any, Dict, Optional

import requests
import urllib3

from .constants import DEBUG_MODE


class HTTPClient:
    def __init__(self, endpoint: Optional[str], token: Optional[str], verify_tls: bool = True):
        if not endpoint:
            raise ValueError("endpoint não configurado")
        if not token:
            raise ValueError("token não configurado")
        self.endpoint = endpoint.rstrip('/')
        self.token = token
        self.verify_tls = verify_tls

        # Suprime avisos de HTTPS inseguro quando a verificação TLS está desativada
        if not self.verify_tls:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            if DEBUG_MODE:
                print("[DEBUG] Avisos de InsecureRequestWarning desabilitados (DEVREV_VERIFY_TLS=false)")

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _request(self, method: str, path: str, body: Optional[Dict] = None) -> requests.Response:
        url = f"{self.endpoint}{path}"
        resp = requests.request(
            method,
            url,
            headers=self._headers(),
            json=body,
            verify=self.verify_tls,
        )
        if DEBUG_MODE:
            print(f"[DEBUG] {method} {url} -> {resp.status_code}")
        resp.raise_for_status()
        return resp

    def post(self, path: str, body: Optional[Dict] = None) -> Any:
        """Envia um POST JSON e retorna o corpo da resposta já decodificado (None se vazio)."""
        resp = self._request("POST", path, body)
        return resp.json() if resp.content else None
