import base64
import structlog

from google.genai import types

from ..config.constants import ANALYSIS_PROMPT
from ..config.env_config import GEMINI_MODEL
from ..utils.image_utils import to_data_uri

logger = structlog.get_logger()

def analyze_plant_image(client, image_bytes: bytes, mime_type: str, model_name: str = GEMINI_MODEL) -> dict:
    """
    Sends a plant image to Gemini and returns its analysis with an echo of the image.
    Args:
        client (genai.Client): Gemini client created at startup.
        image_bytes (bytes): Raw uploaded image.
        mime_type (str): Declared MIME type of the upload.
        model_name (str): Gemini model to query.
    Returns:
        response (dict:{result:str, image:str}): Analysis text and the image as a data URI.
    """
    image_data = base64.b64encode(image_bytes).decode("ascii")

    response = client.models.generate_content(
        model=model_name,
        contents=[
            ANALYSIS_PROMPT,
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        ],
    )
    plant_info = response.text
    if plant_info is None:
        raise ValueError("Model returned no text for the image")

    logger.info("Image analyzed", model=model_name, mime_type=mime_type, result_chars=len(plant_info))

    return {
        "result": plant_info,
        "image": to_data_uri(mime_type, image_data),
    }
