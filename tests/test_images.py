import base64
import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from marketplace.exceptions import ValidationError
from marketplace.services.images import image_to_data_url


def png_bytes(size=(4, 4)):
    buf = io.BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


def test_png_becomes_data_url():
    data = png_bytes()
    upload = SimpleUploadedFile("red.png", data, content_type="image/png")

    url = image_to_data_url(upload)

    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    assert base64.b64decode(url[len(prefix):]) == data


def test_no_file_returns_none():
    assert image_to_data_url(None) is None


def test_non_image_type_rejected():
    upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
    with pytest.raises(ValidationError) as exc_info:
        image_to_data_url(upload)
    assert exc_info.value.message == "File must be an image"


def test_oversized_image_rejected():
    upload = SimpleUploadedFile("big.png", png_bytes(), content_type="image/png")
    with pytest.raises(ValidationError) as exc_info:
        image_to_data_url(upload, max_size=10)
    assert exc_info.value.message.startswith("Image size should be less than")


def test_default_limit_is_five_megabytes():
    upload = SimpleUploadedFile("huge.png", b"x" * (5 * 1024 * 1024 + 1), content_type="image/png")
    with pytest.raises(ValidationError) as exc_info:
        image_to_data_url(upload)
    assert exc_info.value.message == "Image size should be less than 5MB"


def test_empty_file_rejected():
    upload = SimpleUploadedFile("empty.png", b"", content_type="image/png")
    with pytest.raises(ValidationError) as exc_info:
        image_to_data_url(upload)
    assert exc_info.value.message == "File is empty"


def test_corrupt_image_rejected():
    upload = SimpleUploadedFile("fake.png", b"definitely not a png", content_type="image/png")
    with pytest.raises(ValidationError) as exc_info:
        image_to_data_url(upload)
    assert exc_info.value.message == "Failed to process image file"
