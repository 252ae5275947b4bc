"""
Pytest configuration and shared fixtures.

HTTP is served by httpx.MockTransport so no test touches the network.
"""
import httpx
import pytest

from src.buildmap.config import ScrapeConfig
from src.buildmap.models.build import BuildRecord, BuildVersion


def version_line(build_number: str, version_suffix: str) -> str:
    return f"<p><em>Version {build_number} (Build {version_suffix})</em></p>"


def page(*lines: str) -> str:
    body = "\n".join(lines)
    return f"<html><body><h2>Release history</h2>\n{body}\n<p>Other text</p></body></html>"


def record(version: str, build: str) -> BuildRecord:
    return BuildRecord(version_number=BuildVersion.parse(version), build_number=build)


@pytest.fixture
def config() -> ScrapeConfig:
    return ScrapeConfig(base_url="https://docs.test/officeupdates/")


@pytest.fixture
def make_client():
    """
    Build an httpx.Client whose responses come from a {url: response} mapping.

    A value may be a body string (status 200), a (status, body) tuple, a ready
    httpx.Response (e.g. a redirect), or an exception instance raised by the transport. Unknown URLs return 404.
    Requested URLs are recorded on `client.requested`.
    """
    clients = []

    def _make(responses: dict) -> httpx.Client:
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            value = responses.get(url)
            if value is None:
                return httpx.Response(404, text="not found")
            if isinstance(value, Exception):
                raise value
            if isinstance(value, httpx.Response):
                return value
            if isinstance(value, tuple):
                status, body = value
                return httpx.Response(status, text=body)
            return httpx.Response(200, text=value)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requested = requested
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
