# marketplace/services/images.py
"""
Listing photo attachment.

The data service only stores JSON, so an uploaded photo is embedded in the
listing as a ``data:`` URL. Checks run locally, nothing is sent on failure.
"""
import base64
import io

from PIL import Image, UnidentifiedImageError

from marketplace.constants import MAX_IMAGE_SIZE
from marketplace.exceptions import ValidationError


def _megabytes(size):
    mb = size / (1024 * 1024)
    return int(mb) if mb.is_integer() else round(mb, 1)


def image_to_data_url(upload, max_size=MAX_IMAGE_SIZE):
    """
    ``upload`` is a Django ``UploadedFile`` (anything with content_type, size
    and read()). Returns ``None`` when no file was given.
    """
    if not upload:
        return None

    content_type = getattr(upload, "content_type", "") or ""
    if not content_type.startswith("image/"):
        raise ValidationError("File must be an image")

    size = getattr(upload, "size", 0) or 0
    if size > max_size:
        raise ValidationError(f"Image size should be less than {_megabytes(max_size)}MB")
    if size == 0:
        raise ValidationError("File is empty")

    if hasattr(upload, "seek"):
        upload.seek(0)
    data = upload.read()
    if not data:
        raise ValidationError("Failed to read image file")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Failed to process image file")

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{content_type};base64,{encoded}"
