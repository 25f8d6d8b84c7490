import structlog
from flask import Blueprint, request, jsonify, make_response

from ..config.constants import REPORT_ERROR, REPORT_FILENAME
from ..services.report_service import build_plant_report

logger = structlog.get_logger()
report_bp = Blueprint('report', __name__)

@report_bp.route('/download', methods=['POST'])
def download_report():
    """
    Builds a PDF report from a previous analysis.
    Expects a JSON body with optional `result` (analysis text) and `image`
    (image data URI) keys.
    Returns:
        response: The PDF as an attachment, or a JSON error.
    """
    data = request.get_json(silent=True) or {}
    try:
        if not isinstance(data, dict):
            raise ValueError(f"Report body must be a JSON object, got {type(data).__name__}")

        pdf_bytes = build_plant_report(data.get('result'), data.get('image'))

        response = make_response(pdf_bytes)
        response.headers["Content-Type"] = "application/pdf"
        response.headers["Content-Disposition"] = f'attachment; filename="{REPORT_FILENAME}"'
        return response
    except Exception:
        logger.exception("Error generating PDF:\n")
        return jsonify({'error': REPORT_ERROR}), 500
