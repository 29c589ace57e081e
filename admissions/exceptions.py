"""
Errors raised by the admission services and PDF renderers
"""


class AdmissionError(Exception):
    """Base class for admission portal errors"""


class ApplicationIdError(AdmissionError):
    """No free application ID could be generated"""


class RenderError(AdmissionError):
    """A single PDF renderer failed or produced unusable output"""

    def __init__(self, renderer, message):
        self.renderer = renderer
        super().__init__(f"{renderer}: {message}")


class PDFGenerationError(AdmissionError):
    """Every PDF renderer failed"""
