"""
Shared fakes for upstream HTTP responses
"""
from unittest.mock import MagicMock

INVALID_JSON = object()

def fake_response(status=200, json_data=None, text="", content=b"", headers=None):
    """Build a MagicMock that quacks like requests.Response"""
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.text = text
    response.content = content
    response.headers = headers or {}
    if json_data is INVALID_JSON:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = json_data
    return response
