import os
import structlog
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from .config.constants import TOO_LARGE_ERROR
from .config.env_config import GEMINI_MODEL, MAX_CONTENT_LENGTH_MB, STATIC_DIR, UI_URL
from .config.llm_client import create_client
from .endpoints.analyze import analyze_bp
from .endpoints.landing import landing_bp
from .endpoints.report import report_bp
from .utils.request_utils import InMemoryRequest

logger = structlog.get_logger()

def create_app(genai_client=None, config=None):
    """
    Builds the Flask app.
    Arguments:
        genai_client (genai.Client): Gemini client shared by all requests. Created from
            `GEMINI_API_KEY` when not given.
        config (dict): Overrides for the app config.
    Returns:
        app (Flask): Configured application.
    """
    settings = {
        'GEMINI_MODEL': GEMINI_MODEL,
        'MAX_CONTENT_LENGTH': MAX_CONTENT_LENGTH_MB * 1024 * 1024,
        'STATIC_DIR': STATIC_DIR,
        'UI_URL': UI_URL,
    }
    settings.update(config or {})

    app = Flask(__name__, static_folder=os.path.abspath(settings['STATIC_DIR']), static_url_path='')
    app.request_class = InMemoryRequest
    app.config.update(settings)
    CORS(app, resources={r"/*": {"origins": app.config['UI_URL']}})

    app.extensions['genai_client'] = genai_client if genai_client is not None else create_client()

    # Register Blueprints
    app.register_blueprint(landing_bp)
    app.register_blueprint(analyze_bp)
    app.register_blueprint(report_bp)

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(e):
        logger.warning("Rejected request over size limit", limit=app.config['MAX_CONTENT_LENGTH'])
        return jsonify({'error': TOO_LARGE_ERROR}), 413

    return app
