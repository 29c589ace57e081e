"""
Minimal text-only PDF writer
Draws the application as plain lines with ReportLab, no HTML engine involved
"""

import logging
from io import BytesIO
from pathlib import Path

from django.conf import settings
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .base import Renderer
from .document import application_text_lines, render_application_html

logger = logging.getLogger(__name__)

SECTION_HEADINGS = {
    'PERSONAL INFORMATION',
    'ACADEMIC INFORMATION',
    'PAYMENT INFORMATION',
}

DEFAULT_FONT = 'Helvetica'
DEFAULT_BOLD_FONT = 'Helvetica-Bold'


def register_ttf(path):
    """Register a TrueType font file with ReportLab and return its font name"""
    font_name = f"AdmissionText-{Path(path).stem}"
    if font_name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(font_name, str(path)))
    return font_name


def text_fonts():
    """
    Regular and bold font names for the text PDF

    The standard Helvetica fonts only cover Latin text. When PDF_TEXT_FONT_PATH
    points at a TrueType font it is used instead, with PDF_TEXT_BOLD_FONT_PATH
    (or the regular font again) for headings.
    """
    regular_path = getattr(settings, 'PDF_TEXT_FONT_PATH', None)
    if not regular_path:
        return DEFAULT_FONT, DEFAULT_BOLD_FONT

    bold_path = getattr(settings, 'PDF_TEXT_BOLD_FONT_PATH', None) or regular_path
    try:
        return register_ttf(regular_path), register_ttf(bold_path)
    except Exception as e:
        logger.warning(f"Could not load text PDF font {regular_path}, using Helvetica: {str(e)}")
        return DEFAULT_FONT, DEFAULT_BOLD_FONT


class TextPDFGenerator:
    """Write text lines onto Letter pages, wrapping long lines and breaking pages as they fill"""

    left_margin = 50
    top = 750
    bottom = 50
    line_height = 15
    font_size = 12

    def __init__(self, lines, title=None, author=None, font_name=DEFAULT_FONT, bold_font_name=DEFAULT_BOLD_FONT):
        self.lines = lines
        self.title = title
        self.author = author
        self.font_name = font_name
        self.bold_font_name = bold_font_name
        self.width, self.height = letter
        self.buffer = BytesIO()

    @property
    def max_line_width(self):
        return self.width - 2 * self.left_margin

    def layout(self):
        """List of (font name, text) pairs, one per drawn line"""
        drawn = []
        for index, line in enumerate(self.lines):
            if index == 0 or line in SECTION_HEADINGS:
                font = self.bold_font_name
            else:
                font = self.font_name

            for segment in simpleSplit(line, font, self.font_size, self.max_line_width) or ['']:
                drawn.append((font, segment))
        return drawn

    def generate(self):
        """Generate the PDF and return its bytes"""
        # invariant=1 fixes the creation date and document ID so output is reproducible
        c = canvas.Canvas(self.buffer, pagesize=letter, invariant=1)
        if self.title:
            c.setTitle(self.title)
        if self.author:
            c.setAuthor(self.author)

        y_position = self.top
        for font, text in self.layout():
            if y_position < self.bottom:
                c.showPage()
                y_position = self.top

            c.setFont(font, self.font_size)
            c.drawString(self.left_margin, y_position, text)
            y_position -= self.line_height

        c.showPage()
        c.save()

        return self.buffer.getvalue()


class TextRenderer(Renderer):
    """
    Last-resort renderer

    Output is accepted whatever its size. render_to_file() also writes an
    HTML rendering next to the PDF for comparison; that part is best-effort.
    """

    name = 'text'
    min_size = None

    def __init__(self, write_html=True):
        self.write_html = write_html

    def render(self, record):
        application_id = getattr(record, 'application_id', None) or 'N/A'
        font_name, bold_font_name = text_fonts()
        generator = TextPDFGenerator(
            application_text_lines(record),
            title=f"Admission Application - {application_id}",
            author=settings.PORTAL_NAME,
            font_name=font_name,
            bold_font_name=bold_font_name,
        )
        return generator.generate()

    def companion_paths(self, path):
        return [Path(path).with_suffix('.html')] if self.write_html else []

    def render_to_file(self, record, path):
        size = super().render_to_file(record, path)

        if self.write_html:
            html_path = self.companion_paths(path)[0]
            try:
                html_path.write_text(render_application_html(record), encoding='utf-8')
                logger.info(f"HTML reference saved as: {html_path}")
            except Exception as e:
                logger.warning(f"Could not write HTML reference {html_path}: {str(e)}")

        return size
