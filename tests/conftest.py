import pytest

from toolshub import create_app
from toolshub.config import TestingConfig
from toolshub.extensions import db
from toolshub.services.cache_service import CacheService


@pytest.fixture
def app():
    CacheService.reset()
    app = create_app(TestingConfig)

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def category_payload():
    return {
        "slug": "pdf-tools",
        "name": "PDF Tools",
        "description": "Convert, merge, split, and manage your PDF documents.",
        "iconName": "FileText",
        "tags": ["PDF", " documents "],
    }


@pytest.fixture
def tool_payload():
    return {
        "name": "PDF to Word Converter",
        "categorySlug": "pdf-tools",
        "isFree": True,
        "rating": 4.5,
        "summary": "Convert PDF files to editable Word documents.",
        "description": "<p>Turns PDFs into .docx files.</p>",
        "usageSteps": "Upload your PDF\nClick convert\n\nDownload",
        "websiteLink": "https://example.com/pdf-to-word",
        "tags": "PDF, Word, converter",
    }


@pytest.fixture
def make_tool(client, tool_payload):
    def _make(**overrides):
        payload = dict(tool_payload)
        payload.update(overrides)
        response = client.post("/api/tools/add", json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]
    return _make
