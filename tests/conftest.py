"""Test configuration and fixtures."""
import json
import pytest
import requests
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.dependencies import get_relay_service
from app.main import app
from app.services.relay_service import RelayService


def make_download(chunks, status_code=200):
    """Build a streamed GET response yielding the given chunks."""
    response = MagicMock()
    response.__enter__.return_value = response
    response.status_code = status_code
    response.iter_content.return_value = iter(chunks)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error: Not Found"
        )
    return response


def make_response(status_code, body):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = body.encode()
        response.headers["Content-Type"] = "text/plain"
    return response


@pytest.fixture
def staging_dir(tmp_path):
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def settings(staging_dir):
    return Settings(
        default_target_url="https://upload.example.com/api/v1/upload/",
        staging_dir=str(staging_dir),
        fetch_timeout=5,
        forward_timeout=5,
    )


@pytest.fixture
def fake_session():
    """requests.Session double: file download succeeds, upload answers 200."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_download([b"%PDF-1.4 ", b"report body"])
    session.post.return_value = make_response(200, {"documentId": "D-1"})
    return session


@pytest.fixture
def relay_service(settings, fake_session):
    return RelayService(settings, session=fake_session)


@pytest.fixture
def client(relay_service):
    """Create a test client wired to the fake session."""
    app.dependency_overrides[get_relay_service] = lambda: relay_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def relay_body():
    return {
        "fileUrl": "https://files.example.com/dir/report.pdf",
        "documentType": "CLAIM",
        "refId": "REF-1",
        "entityId": "E-9",
        "entityName": "Policy",
        "lobId": "7",
        "contextId": "CTX-3",
        "BMPReff": "BMP-42",
    }


@pytest.fixture
def relay_headers():
    return {
        "authorization": "Bearer token-abc",
        "subscription-key": "sub-key-123",
    }
