from io import BytesIO

from flask import Request

class InMemoryRequest(Request):
    """
    Request that buffers multipart file parts in memory instead of spooling
    large ones to a temporary file.
    """

    def _get_file_stream(self, total_content_length, content_type, filename=None, content_length=None):
        return BytesIO()
