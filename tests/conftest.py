import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from cafe_admin.core.config import Settings
from cafe_admin.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password-123"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'cafe-test.db'}",
        SECRET_KEY="test-secret-key",
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        UPLOAD_FOLDER=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client, settings):
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    assert client.cookies.get(settings.SESSION_COOKIE_NAME)
    return client


@pytest.fixture
def order_payload():
    return {
        "customer": {
            "name": "Ana",
            "phone": "555-0101",
            "email": "ana@example.com",
            "address": "12 High St",
        },
        "items": [
            {"id": 1, "name": "Sample Coffee", "quantity": 2, "price": 120},
            {"id": 2, "name": "Sample Sandwich", "quantity": 1, "price": 250},
        ],
        "total": 490,
    }


def make_png(size=(40, 30), color=(200, 120, 40, 255)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png()
