#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from frustration_alerts.client import HTTPClient


def _response(status_code=200, content=b'{"ok": true}', payload=None):
    resp = Mock()
    resp.status_code = status_code
    resp.content = content
    resp.json.return_value = payload if payload is not None else {"ok": True}
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        resp.raise_for_status.return_value = None
    return resp


class TestHTTPClient(unittest.TestCase):
    def test_requires_endpoint_and_token(self):
        with self.assertRaises(ValueError):
            HTTPClient(endpoint=None, token="abc")
        with self.assertRaises(ValueError):
            HTTPClient(endpoint="https://api.example.com", token="")

    @patch('frustration_alerts.client.requests.request')
    def test_post_sends_bearer_token_and_json(self, mock_request):
        mock_request.return_value = _response(payload={"id": "esc-1"})
        client = HTTPClient(endpoint="https://api.example.com/", token="secret")

        result = client.post("/support/escalate", {"customerId": "c1"})

        self.assertEqual(result, {"id": "esc-1"})
        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("POST", "https://api.example.com/support/escalate"))
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer secret")
        self.assertEqual(kwargs["json"], {"customerId": "c1"})
        self.assertTrue(kwargs["verify"])

    @patch('frustration_alerts.client.requests.request')
    def test_empty_body_returns_none(self, mock_request):
        mock_request.return_value = _response(status_code=204, content=b'')
        client = HTTPClient(endpoint="https://api.example.com", token="secret")

        self.assertIsNone(client.post("/notifications/manager", {}))

    @patch('frustration_alerts.client.requests.request')
    def test_http_error_is_raised(self, mock_request):
        mock_request.return_value = _response(status_code=502)
        client = HTTPClient(endpoint="https://api.example.com", token="secret")

        with self.assertRaises(requests.HTTPError):
            client.post("/support/escalate", {})

    @patch('frustration_alerts.client.requests.request')
    def test_network_error_propagates(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("connection refused")
        client = HTTPClient(endpoint="https://api.example.com", token="secret")

        with self.assertRaises(requests.ConnectionError):
            client.post("/support/escalate", {})

    @patch('frustration_alerts.client.urllib3.disable_warnings')
    def test_insecure_tls_silences_warnings(self, mock_disable):
        client = HTTPClient(endpoint="https://api.example.com", token="secret", verify_tls=False)

        self.assertFalse(client.verify_tls)
        mock_disable.assert_called_once()


if __name__ == '__main__':
    unittest.main()
