import base64
from io import BytesIO
from types import SimpleNamespace

import pytest
from PIL import Image

from plant_server import create_app


class FakeModels:
    def __init__(self, text="Healthy fern. Water weekly.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents):
        self.calls.append({"model": model, "contents": contents})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGenaiClient:
    def __init__(self, **kwargs):
        self.models = FakeModels(**kwargs)


def make_png(size=(40, 20), color="green") -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_png_data_uri(size=(40, 20)) -> str:
    return "data:image/png;base64," + base64.b64encode(make_png(size)).decode("ascii")


@pytest.fixture
def genai_client():
    return FakeGenaiClient()


@pytest.fixture
def app(genai_client, tmp_path):
    return create_app(genai_client=genai_client, config={
        "TESTING": True,
        "STATIC_DIR": str(tmp_path),
        "GEMINI_MODEL": "gemini-test",
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_bytes():
    return make_png()
