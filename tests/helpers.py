"""Canned responses and a recording session shared by the test modules."""

import json
from urllib.parse import parse_qsl, urlsplit

import requests

BASE_URL = "https://yts.test/api/v2"


def make_response(body, status_code=200, url=BASE_URL):
    """Build a real requests.Response; dict/list bodies are JSON-encoded."""
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    response.url = url
    response.reason = "OK" if status_code == 200 else "Error"
    return response


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

    @property
    def last_query(self):
        """Query parameters of the last request as (key, value) pairs."""
        return parse_qsl(urlsplit(self.calls[-1]["url"]).query, keep_blank_values=True)


def envelope(movies):
    return {
        "status": "ok",
        "status_message": "Query was successful",
        "data": {"movie_count": len(movies), "limit": 50, "page_number": 1, "movies": movies},
        "@meta": {"server_time": 1700000000, "api_version": 2},
    }
