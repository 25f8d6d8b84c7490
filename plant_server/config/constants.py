ANALYSIS_PROMPT = (
    "Analyze this plant image and provide detailed analysis of its species, "
    "health, and care recommendations. Plain text only."
)

LANDING_TEXT = "Plant Analysis API is live. Use /analyze or /download routes."

REPORT_TITLE = "Plant Analysis Report"
REPORT_PLACEHOLDER = "No data available"
REPORT_FILENAME = "plant_report.pdf"
REPORT_DATE_FORMAT = "%m/%d/%Y"
# Bounding box (points) for the image page
REPORT_IMAGE_FIT = (500, 400)

NO_IMAGE_ERROR = "No image uploaded"
ANALYSIS_ERROR = "Error analyzing image"
REPORT_ERROR = "Error generating PDF report"
TOO_LARGE_ERROR = "Request too large"

DEFAULT_MIME_TYPE = 'application/octet-stream'

MIME_TYPES = {
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
    'gif': 'image/gif',
    'webp': 'image/webp',
    'bmp': 'image/bmp',
    'heic': 'image/heic',
    'heif': 'image/heif',
}
