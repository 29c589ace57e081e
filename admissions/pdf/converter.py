"""
Server-side HTML to PDF conversion with WeasyPrint (no browser process)
"""

import logging

from django.conf import settings

from .base import Renderer
from .document import render_application_html

logger = logging.getLogger(__name__)


class ConverterRenderer(Renderer):
    """Render the HTML application document with WeasyPrint"""

    name = 'converter'

    def __init__(self, min_size=5000, base_url=None):
        self.min_size = min_size
        self.base_url = base_url

    def render(self, record):
        # Imported here: WeasyPrint needs Pango/Cairo system libraries and a
        # host without them should fall through to the next renderer.
        from weasyprint import HTML

        html_content = render_application_html(record)
        base_url = self.base_url or str(settings.BASE_DIR)

        logger.info("Converting HTML to PDF with WeasyPrint...")
        pdf_bytes = HTML(string=html_content, base_url=base_url).write_pdf()
        logger.info(f"WeasyPrint produced {len(pdf_bytes)} bytes")

        return pdf_bytes
