from .base import Renderer
from .browser import BrowserRenderer
from .converter import ConverterRenderer
from .dispatcher import PDFDispatcher, build_default_dispatcher
from .document import render_application_html
from .text import TextRenderer

__all__ = [
    'Renderer',
    'BrowserRenderer',
    'ConverterRenderer',
    'TextRenderer',
    'PDFDispatcher',
    'build_default_dispatcher',
    'render_application_html',
]
