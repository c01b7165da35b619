"""
유틸리티 모듈
"""

from .image_utils import (
    ImageProcessingError,
    image_file_to_base64,
    pil_image_to_base64,
    validate_base64_image,
)
from .log_utils import setup_logging

__all__ = [
    "ImageProcessingError",
    "image_file_to_base64",
    "pil_image_to_base64",
    "validate_base64_image",
    "setup_logging",
]
