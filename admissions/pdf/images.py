"""
Image helpers for embedding uploads, the college logo and the QR code
into the HTML application document
"""

import base64
import logging
import os
from io import BytesIO
from pathlib import Path

import qrcode
from django.conf import settings
from PIL import Image

logger = logging.getLogger(__name__)


def resolve_file_path(value):
    """
    Return a filesystem Path for a stored file reference

    Accepts plain paths as well as Django FieldFile objects. Returns None
    when nothing is referenced or the storage has no local path.
    """
    if not value:
        return None

    if isinstance(value, (str, os.PathLike)):
        return Path(value)

    try:
        return Path(value.path)
    except (AttributeError, ValueError, NotImplementedError):
        return None


def image_to_data_uri(value, max_bytes=None):
    """
    Convert an image file to a base64 data URI

    Args:
        value: path or FieldFile pointing at the image
        max_bytes (int, optional): files larger than this are skipped

    Returns:
        str or None: "data:<mime>;base64,..." or None if the file is missing,
        too large or not a readable image
    """
    if max_bytes is None:
        max_bytes = getattr(settings, 'PDF_MAX_IMAGE_BYTES', 5 * 1024 * 1024)

    path = resolve_file_path(value)
    if path is None:
        return None

    try:
        if not path.is_file():
            logger.warning(f"Image not found or invalid path: {path}")
            return None

        size = path.stat().st_size
        if max_bytes and size > max_bytes:
            logger.warning(f"Image too large to embed ({size} bytes): {path}")
            return None

        with Image.open(path) as img:
            image_format = img.format
            img.verify()

        mime_type = Image.MIME.get(image_format)
        if not mime_type:
            logger.warning(f"Unsupported image format {image_format}: {path}")
            return None

        encoded = base64.b64encode(path.read_bytes()).decode('ascii')
    except Exception as e:
        logger.warning(f"Error converting image to base64 ({path}): {str(e)}")
        return None

    return f"data:{mime_type};base64,{encoded}"


def find_logo_data_uri(candidates=None):
    """Return the first readable logo from the configured locations"""
    if candidates is None:
        candidates = getattr(settings, 'PDF_LOGO_PATHS', [])

    for logo_path in candidates:
        if os.path.exists(logo_path):
            data_uri = image_to_data_uri(logo_path)
            if data_uri:
                logger.debug(f"Logo found at: {logo_path}")
                return data_uri

    logger.debug("Logo not found, proceeding without logo")
    return None


def build_qr_data_uri(data):
    """Encode data as a PNG QR code data URI"""
    qr = qrcode.QRCode(version=1, box_size=10, border=2)
    qr.add_data(data)
    qr.make(fit=True)

    qr_img = qr.make_image(fill_color="black", back_color="white")

    qr_buffer = BytesIO()
    qr_img.save(qr_buffer, format='PNG')

    encoded = base64.b64encode(qr_buffer.getvalue()).decode('ascii')
    return f"data:image/png;base64,{encoded}"
