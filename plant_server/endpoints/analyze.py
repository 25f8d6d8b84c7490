import structlog
from flask import Blueprint, current_app, request, jsonify

from ..config.constants import ANALYSIS_ERROR, NO_IMAGE_ERROR
from ..services.analysis_service import analyze_plant_image
from ..utils.image_utils import get_upload_mime_type

logger = structlog.get_logger()
analyze_bp = Blueprint('analyze', __name__)

@analyze_bp.route('/analyze', methods=['POST'])
def analyze():
    """
    Receives a plant image as the multipart field `image` and returns Gemini's
    analysis of it.
    Returns:
        response (dict:{result:str, image:str}): Analysis text and the uploaded image as a data URI.
    """
    file = request.files.get('image')
    image_bytes = file.read() if file else b""
    if not image_bytes:
        return jsonify({'error': NO_IMAGE_ERROR}), 400

    try:
        mime_type = get_upload_mime_type(file)
        logger.info("Received image", filename=file.filename, mime_type=mime_type, size=len(image_bytes))

        response = analyze_plant_image(
            current_app.extensions['genai_client'],
            image_bytes,
            mime_type,
            current_app.config['GEMINI_MODEL'],
        )
        return jsonify(response)
    except Exception:
        logger.exception("Error analyzing image:\n")
        return jsonify({'error': ANALYSIS_ERROR}), 500
