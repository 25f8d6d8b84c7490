import os
from flask import Blueprint, current_app, send_from_directory

from ..config.constants import LANDING_TEXT

landing_bp = Blueprint('landing', __name__)

@landing_bp.route('/', methods=['GET'])
def index():
    """
    Serves the frontend's index.html when present, otherwise a plain-text liveness message.
    """
    static_dir = current_app.static_folder
    if static_dir and os.path.isfile(os.path.join(static_dir, 'index.html')):
        return send_from_directory(static_dir, 'index.html')
    return LANDING_TEXT, 200, {'Content-Type': 'text/plain; charset=utf-8'}
