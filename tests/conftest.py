import base64
import io
import os
import sys

import pytest
from PIL import Image

# Ensure src is in python path
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from swarmui_client.schemas.generation_request import GenerationRequest


@pytest.fixture
def basic_request():
    """프롬프트만 설정된 기본 요청"""
    return GenerationRequest(prompt="a red fox")


@pytest.fixture
def temp_image_path(tmp_path):
    """테스트용 임시 이미지 생성"""
    img_path = tmp_path / "test_image.png"

    # 100x100 빨간색 이미지 생성
    img = Image.new("RGB", (100, 100), color="red")
    img.save(img_path, "PNG")

    return img_path


@pytest.fixture
def sample_base64_image():
    """테스트용 Base64 이미지 생성"""
    img = Image.new("RGB", (50, 50), color="blue")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")
