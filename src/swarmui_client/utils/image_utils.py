"""
초기 이미지 유틸리티
img2img 요청용 Base64 인코딩 및 이미지 검증 기능
"""

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..config import MAX_INIT_IMAGE_SIZE_MB, SUPPORTED_IMAGE_FORMATS

logger = logging.getLogger(__name__)


class ImageProcessingError(Exception):
    """이미지 처리 중 발생하는 에러"""

    pass


def _check_format(img_format: Optional[str]) -> None:
    if img_format not in SUPPORTED_IMAGE_FORMATS:
        raise ImageProcessingError(
            f"지원하지 않는 이미지 포맷: {img_format}. "
            f"지원 포맷: {', '.join(sorted(SUPPORTED_IMAGE_FORMATS))}"
        )


def image_file_to_base64(file_path: str | Path) -> str:
    """
    이미지 파일을 읽어서 Base64 문자열로 변환

    Args:
        file_path: 이미지 파일 경로

    Returns:
        Base64로 인코딩된 이미지 문자열

    Raises:
        ImageProcessingError: 파일을 읽을 수 없거나 유효하지 않은 이미지인 경우
    """
    path = Path(file_path)

    if not path.exists():
        raise ImageProcessingError(f"파일을 찾을 수 없습니다: {file_path}")

    file_size_mb = path.stat().st_size / (1024 * 1024)
    if file_size_mb > MAX_INIT_IMAGE_SIZE_MB:
        raise ImageProcessingError(
            f"파일 크기가 너무 큽니다: {file_size_mb:.2f}MB "
            f"(최대: {MAX_INIT_IMAGE_SIZE_MB}MB)"
        )

    try:
        with Image.open(path) as img:
            img_format = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProcessingError(f"유효하지 않은 이미지 파일: {e}") from e
    _check_format(img_format)

    encoded = base64.b64encode(path.read_bytes()).decode("utf-8")
    logger.debug(f"이미지 인코딩 완료: {path.name} ({file_size_mb:.2f}MB, {img_format})")
    return encoded


def pil_image_to_base64(image: Image.Image, image_format: str = "PNG") -> str:
    """
    PIL 이미지를 Base64 문자열로 변환

    Args:
        image: PIL 이미지
        image_format: 저장 포맷 (PNG, JPEG, WEBP)

    Returns:
        Base64로 인코딩된 이미지 문자열
    """
    image_format = image_format.upper()
    if image_format == "JPG":
        image_format = "JPEG"
    _check_format(image_format)

    if image_format == "JPEG" and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def _decode(base64_str: str) -> bytes:
    # data URL 접두사 제거
    if base64_str.startswith("data:image"):
        _, sep, base64_str = base64_str.partition(",")
        if not sep or not base64_str:
            raise ValueError("data URL에 이미지 데이터가 없습니다")
    return base64.b64decode(base64_str, validate=True)


def validate_base64_image(base64_str: str) -> tuple[bool, Optional[str]]:
    """
    Base64 문자열이 유효한 이미지인지 검증

    Args:
        base64_str: 검증할 Base64 문자열

    Returns:
        (유효 여부, 에러 메시지) 튜플. 유효하면 에러 메시지는 None
    """
    try:
        image_data = _decode(base64_str)
    except (binascii.Error, ValueError) as e:
        return False, f"Base64 디코딩 실패: {e}"

    if len(image_data) > MAX_INIT_IMAGE_SIZE_MB * 1024 * 1024:
        return False, f"이미지 크기가 너무 큽니다 (최대: {MAX_INIT_IMAGE_SIZE_MB}MB)"

    try:
        img = Image.open(io.BytesIO(image_data))
        img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        return False, f"유효하지 않은 이미지: {e}"

    if img.format not in SUPPORTED_IMAGE_FORMATS:
        return False, (
            f"지원하지 않는 이미지 포맷: {img.format}. "
            f"지원 포맷: {', '.join(sorted(SUPPORTED_IMAGE_FORMATS))}"
        )

    return True, None

