import base64
import binascii
import re
from io import BytesIO

from PIL import Image

from ..config.constants import DEFAULT_MIME_TYPE, MIME_TYPES

DATA_URI_PATTERN = re.compile(r"^data:(image/[\w.+-]+);base64,(.*)$", re.DOTALL)

def get_upload_mime_type(file) -> str:
    """
    Returns the declared MIME type of an uploaded file, guessing it from the
    filename extension when the part carries none.
    """
    if file.mimetype:
        return file.mimetype
    extension = str(file.filename or "").rsplit(".", 1)[-1].lower()
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)

def to_data_uri(mime_type: str, b64_data: str) -> str:
    return f"data:{mime_type};base64,{b64_data}"

def decode_image_data_uri(data_uri: str) -> bytes:
    """
    Decodes an image data URI into raw image bytes.
    Arguments:
        data_uri (str): String shaped as `data:image/<type>;base64,<payload>`.
    Returns:
        image_bytes (bytes): Decoded payload, verified to be a readable image.
    Raises:
        ValueError: If the prefix, the base64 payload or the image content is invalid.
    """
    if not isinstance(data_uri, str):
        raise ValueError(f"Image must be a data URI string, got {type(data_uri).__name__}")

    match = DATA_URI_PATTERN.match(data_uri.strip())
    if not match:
        raise ValueError("Image is not a base64 image data URI")

    payload = re.sub(r"\s+", "", match.group(2))
    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image payload: {e}") from e

    if not image_bytes:
        raise ValueError("Image payload is empty")

    try:
        with Image.open(BytesIO(image_bytes)) as image:
            image.verify()
    except (OSError, SyntaxError) as e:
        raise ValueError(f"Payload is not a readable image: {e}") from e

    return image_bytes
