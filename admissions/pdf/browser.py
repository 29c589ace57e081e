"""
Headless Chromium PDF rendering with Playwright
"""

import logging

from playwright.sync_api import sync_playwright

from .base import Renderer
from .document import render_application_html

logger = logging.getLogger(__name__)

PAGE_MARGINS = {
    'top': '10px',
    'right': '15px',
    'bottom': '15px',
    'left': '15px',
}


class BrowserRenderer(Renderer):
    """
    Render the HTML application document in headless Chromium

    One browser is launched per render() call and closed before returning,
    whether the render succeeded, raised or timed out.
    """

    name = 'browser'

    def __init__(self, min_size=1000, timeout_ms=30000, executable_path=None, launch_args=None):
        self.min_size = min_size
        self.timeout_ms = timeout_ms
        self.executable_path = executable_path
        self.launch_args = list(launch_args or [])

    def launch_options(self):
        options = {'headless': True, 'args': self.launch_args}
        if self.executable_path:
            options['executable_path'] = self.executable_path
        return options

    def render(self, record):
        html_content = render_application_html(record)

        with sync_playwright() as p:
            logger.info("Launching Chromium for PDF generation")
            browser = p.chromium.launch(**self.launch_options())
            try:
                page = browser.new_page(viewport={'width': 1200, 'height': 800})
                page.set_default_timeout(self.timeout_ms)

                logger.info("Setting HTML content for PDF generation...")
                page.set_content(html_content, wait_until='networkidle', timeout=self.timeout_ms)
                page.emulate_media(media='print')

                logger.info("Generating PDF...")
                pdf_bytes = page.pdf(
                    format='A4',
                    print_background=True,
                    margin=PAGE_MARGINS,
                )
            finally:
                browser.close()
                logger.info("Browser closed")

        logger.info(f"Chromium produced {len(pdf_bytes)} bytes")
        return pdf_bytes
