import structlog

from datetime import datetime
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..config.constants import REPORT_DATE_FORMAT, REPORT_IMAGE_FIT, REPORT_PLACEHOLDER, REPORT_TITLE
from ..utils.image_utils import decode_image_data_uri

logger = structlog.get_logger()

# Frame padding SimpleDocTemplate applies on each side
FRAME_PADDING = 6

def build_plant_report(result=None, image=None) -> bytes:
    """
    Renders the analysis text and, optionally, the analysed image into a PDF.
    Args:
        result (str): Analysis text. Falsy values render a placeholder.
        image (str): Image data URI. Falsy values skip the image page.
    Returns:
        pdf_bytes (bytes): The complete PDF document.
    """
    if result and not isinstance(result, str):
        raise ValueError(f"Result must be a string, got {type(result).__name__}")

    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=LETTER, title=REPORT_TITLE)
    styles = _get_report_styles()

    story = [
        Paragraph(escape(REPORT_TITLE), styles["title"]),
        Spacer(1, 14),
        Paragraph(f"Date: {datetime.now().strftime(REPORT_DATE_FORMAT)}", styles["date"]),
        Spacer(1, 14),
        Paragraph(_to_paragraph_markup(result or REPORT_PLACEHOLDER), styles["body"]),
    ]

    if image:
        image_bytes = decode_image_data_uri(image)
        story.append(PageBreak())
        story.append(_get_centered_image(image_bytes, doc.width, doc.height))

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    logger.info("PDF report generated", size=len(pdf_bytes), with_image=bool(image))
    return pdf_bytes

def _get_report_styles() -> dict:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ReportTitle", parent=base["Title"], fontSize=24, leading=28, alignment=TA_CENTER),
        "date": ParagraphStyle("ReportDate", parent=base["Normal"], fontSize=14, leading=18),
        "body": ParagraphStyle("ReportBody", parent=base["Normal"], fontSize=12, leading=15),
    }

def _to_paragraph_markup(text: str) -> str:
    # Paragraph parses a mini-XML dialect and collapses newlines
    return escape(text).replace("\r\n", "\n").replace("\n", "<br/>")

def _get_centered_image(image_bytes: bytes, frame_width: float, frame_height: float) -> Table:
    """
    Scales the image to fit the report bounding box, keeping its aspect ratio,
    and places it in the middle of the page frame.
    """
    img_width, img_height = ImageReader(BytesIO(image_bytes)).getSize()
    box_width, box_height = REPORT_IMAGE_FIT
    scale = min(box_width / img_width, box_height / img_height)
    width, height = img_width * scale, img_height * scale

    flowable = Image(BytesIO(image_bytes), width=width, height=height)
    # Single cell spanning the frame, one point short so it never spills over
    cell = Table([[flowable]], colWidths=[frame_width - 2 * FRAME_PADDING], rowHeights=[frame_height - 2 * FRAME_PADDING - 1])
    cell.setStyle(TableStyle([
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
    ]))
    return cell
