import os

os.environ.setdefault("TMDB_ACCESS_TOKEN", "test-token")
os.environ.setdefault("TMDB_BASE_URL", "https://tmdb.test")

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.clients.tmdb_client import TMDBClient, build_tmdb_client
from app.config import Settings
from app.dependencies import get_tmdb_client
from app.main import app


class UpstreamRecorder:
    """
    Fake TMDB behind an httpx.MockTransport.
    `responder(request)` decides the answer, every request is recorded.
    The client is built like the production one and shared by all requests.
    """

    def __init__(self, responder=None):
        self.requests = []
        self.responder = responder or (lambda request: httpx.Response(200, json={}))
        settings = Settings(
            TMDB_ACCESS_TOKEN="test-token",
            TMDB_BASE_URL="https://tmdb.test",
        )
        self.client = TMDBClient(
            build_tmdb_client(settings, transport=httpx.MockTransport(self))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest_asyncio.fixture
async def upstream():
    recorder = UpstreamRecorder()
    yield recorder
    await recorder.client.aclose()


@pytest.fixture
def api(upstream):
    app.dependency_overrides[get_tmdb_client] = lambda: upstream.client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
