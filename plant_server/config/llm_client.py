from google import genai
from google.genai import types

from .env_config import GEMINI_API_KEY, GEMINI_TIMEOUT_MS

def create_client(api_key: str = GEMINI_API_KEY, timeout_ms: int = GEMINI_TIMEOUT_MS) -> genai.Client:
    """
    Builds the Google Generative AI client shared by every request.
    Arguments:
        api_key (str): Gemini API key.
        timeout_ms (int): HTTP timeout applied to each upstream call, in milliseconds.
    Returns:
        client (genai.Client): Configured client.
    """
    if not api_key:
        raise ValueError("GEMINI_API_KEY is not set in .env")

    return genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(timeout=timeout_ms)
    )
