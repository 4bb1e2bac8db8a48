import json
import requests
from unittest.mock import MagicMock

def make_response(payload=None, status_code=200, reason="OK", url="http://localhost:5000/", body=None):
    """Builds a real requests.Response carrying ``payload`` as JSON (or raw ``body``)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    if body is None:
        body = json.dumps(payload)
    response._content = body.encode("utf-8")
    return response

def make_session(response=None, error=None):
    session = MagicMock(spec=requests.Session)
    for method in (session.request, session.get):
        if error is not None:
            method.side_effect = error
        else:
            method.return_value = response
    return session
