"""In-process stand-in for the GitHub REST API built on httpx.MockTransport."""

from typing import Any

import httpx

Route = tuple[int, Any]


class FakeGitHubAPI:
    """Serves canned responses keyed by request path and records every call.

    A route body that is an exception is raised instead of answered, which
    httpx surfaces to the caller as a transport failure.
    """

    def __init__(self, routes: dict[str, Route]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})

        status, body = self.routes[request.url.path]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def commit_payload(date: str) -> list[dict[str, Any]]:
    """Build a one-element commit list as returned by the commits endpoint."""
    return [
        {
            "sha": "0123456789abcdef",
            "commit": {
                "author": {"name": "A", "date": date},
                "committer": {"name": "C", "date": date},
                "message": "latest",
            },
        }
    ]
