"""
PDF generation fallback chain

Renderers are tried in order. A renderer's output is accepted unless it
raises or writes fewer bytes than its min_size, in which case the partial
file is removed and the next renderer runs. The last renderer is terminal:
its output is accepted unconditionally and its failure is the only fatal one.
Side files from renderers other than the accepted one are removed so they
never sit next to a PDF they do not describe.
"""

import logging
from pathlib import Path

from django.conf import settings

from admissions.exceptions import PDFGenerationError, RenderError

from .browser import BrowserRenderer
from .converter import ConverterRenderer
from .text import TextRenderer

logger = logging.getLogger(__name__)


class PDFDispatcher:
    """Run an ordered list of renderers until one produces an acceptable PDF"""

    def __init__(self, renderers):
        renderers = list(renderers)
        if not renderers:
            raise ValueError("PDFDispatcher needs at least one renderer")
        self.renderers = renderers

    @property
    def terminal(self):
        return self.renderers[-1]

    def render(self, record, destination, force_fallback=False):
        """
        Produce a PDF for record at destination

        Args:
            record: application record (any object exposing its fields)
            destination: output file path
            force_fallback (bool): skip straight to the terminal renderer

        Returns:
            dict: {'path', 'renderer', 'bytes'} for the accepted output

        Raises:
            PDFGenerationError: the terminal renderer failed
        """
        destination = Path(destination)
        application_id = getattr(record, 'application_id', None)
        logger.info(f"Starting PDF generation for application {application_id}: {destination}")

        if force_fallback:
            logger.warning(f"Forced fallback mode enabled, using {self.terminal.name} renderer")
            return self._render_terminal(record, destination)

        for renderer in self.renderers[:-1]:
            logger.info(f"Attempting PDF generation with {renderer.name} renderer...")
            try:
                size = renderer.render_to_file(record, destination)
                self._check_size(renderer, size)
            except RenderError as e:
                logger.warning(f"{str(e)}, trying next renderer")
                self._discard(destination)
                continue
            except Exception as e:
                logger.error(f"{renderer.name} renderer failed: {str(e)}", exc_info=True)
                self._discard(destination)
                continue

            logger.info(f"PDF generated with {renderer.name} renderer ({size} bytes)")
            self._discard_companions(destination, accepted=renderer)
            return self._result(destination, renderer, size)

        return self._render_terminal(record, destination)

    def _render_terminal(self, record, destination):
        renderer = self.terminal
        logger.info(f"Using {renderer.name} renderer (basic formatting only)")
        try:
            size = renderer.render_to_file(record, destination)
        except Exception as e:
            logger.error(f"All PDF generation methods failed: {str(e)}", exc_info=True)
            self._discard(destination)
            self._discard_companions(destination)
            raise PDFGenerationError(
                f"PDF generation failed with all methods. Last error: {str(e)}"
            ) from e

        logger.info(f"PDF generated with {renderer.name} renderer ({size} bytes)")
        return self._result(destination, renderer, size)

    @staticmethod
    def _check_size(renderer, size):
        if renderer.min_size is not None and size < renderer.min_size:
            raise RenderError(
                renderer.name,
                f"output too small ({size} bytes, minimum {renderer.min_size})"
            )

    @staticmethod
    def _result(destination, renderer, size):
        return {
            'path': destination,
            'renderer': renderer.name,
            'bytes': size,
        }

    def _discard_companions(self, destination, accepted=None):
        """Remove side files left by other renderers for the same destination"""
        for renderer in self.renderers:
            if renderer is accepted:
                continue
            for path in renderer.companion_paths(destination):
                self._discard(path)

    @staticmethod
    def _discard(path):
        try:
            path.unlink()
            logger.info(f"Removed stale file: {path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove stale file {path}: {str(e)}")


def build_default_dispatcher():
    """
    Dispatcher with the standard renderer order:
    WeasyPrint converter, then headless Chromium, then the plain text writer
    """
    return PDFDispatcher([
        ConverterRenderer(min_size=settings.PDF_CONVERTER_MIN_BYTES),
        BrowserRenderer(
            min_size=settings.PDF_BROWSER_MIN_BYTES,
            timeout_ms=settings.PDF_RENDER_TIMEOUT_MS,
            executable_path=settings.PDF_BROWSER_EXECUTABLE,
            launch_args=settings.PDF_BROWSER_ARGS,
        ),
        TextRenderer(),
    ])
