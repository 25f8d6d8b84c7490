import base64
from io import BytesIO

import pytest
from werkzeug.datastructures import FileStorage

from plant_server.utils.image_utils import decode_image_data_uri, get_upload_mime_type, to_data_uri


def test_to_data_uri():
    assert to_data_uri("image/webp", "AAAA") == "data:image/webp;base64,AAAA"


def test_decode_image_data_uri(png_bytes):
    data_uri = "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
    assert decode_image_data_uri(data_uri) == png_bytes


def test_decode_image_data_uri_ignores_line_breaks(png_bytes):
    encoded = base64.b64encode(png_bytes).decode("ascii")
    wrapped = "\n".join(encoded[i:i + 16] for i in range(0, len(encoded), 16))
    assert decode_image_data_uri("data:image/png;base64," + wrapped) == png_bytes


@pytest.mark.parametrize("data_uri", [
    "iVBORw0KGgo=",
    "data:image/png,iVBORw0KGgo=",
    "data:application/pdf;base64,JVBERi0=",
    "data:image/png;base64,",
    "data:image/png;base64,###",
    123,
])
def test_decode_image_data_uri_rejects_invalid(data_uri):
    with pytest.raises(ValueError):
        decode_image_data_uri(data_uri)


def test_upload_mime_type_from_part():
    file = FileStorage(BytesIO(b"x"), filename="leaf.bin", content_type="image/png")
    assert get_upload_mime_type(file) == "image/png"


def test_upload_mime_type_guessed_from_extension():
    file = FileStorage(BytesIO(b"x"), filename="leaf.JPG")
    assert get_upload_mime_type(file) == "image/jpeg"


def test_upload_mime_type_unknown_extension():
    file = FileStorage(BytesIO(b"x"), filename="leaf")
    assert get_upload_mime_type(file) == "application/octet-stream"
