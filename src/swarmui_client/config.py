"""
SwarmUI 클라이언트 설정
생성 요청 스키마의 기본값, 검증 제약조건, 로깅 설정 상수들
"""

import os
from typing import Final

# =============================================================================
# 로깅 설정
# =============================================================================

LOG_LEVEL: Final[str] = os.getenv("SWARMUI_LOG_LEVEL", "INFO")
"""로깅 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""로그 메시지 포맷"""

LOG_FILE: Final[str] = os.getenv("SWARMUI_LOG_FILE", "")
"""로그 파일 경로 (빈 문자열이면 콘솔만 사용)"""

# =============================================================================
# 검증 정책
# =============================================================================

ENFORCE_EXCLUSIVE_FIELDS: Final[bool] = (
    os.getenv("SWARMUI_ENFORCE_EXCLUSIVE_FIELDS", "false").lower() == "true"
)
"""상호 배타적인 백엔드 필드가 동시에 설정되면 직렬화를 거부할지 여부 (기본값: 경고만 기록)"""

VALIDATE_INIT_IMAGE: Final[bool] = (
    os.getenv("SWARMUI_VALIDATE_INIT_IMAGE", "false").lower() == "true"
)
"""직렬화 시 initimage를 디코딩해 실제 이미지인지 확인할지 여부 (기본값: 확인 안 함)"""

# =============================================================================
# 이미지 처리
# =============================================================================

MAX_INIT_IMAGE_SIZE_MB: Final[int] = int(os.getenv("SWARMUI_MAX_INIT_IMAGE_MB", "20"))
"""img2img 초기 이미지의 최대 크기 (메가바이트)"""

SUPPORTED_IMAGE_FORMATS: Final[set[str]] = {"PNG", "JPEG", "WEBP"}
"""초기 이미지로 허용하는 입력 포맷 (Pillow 포맷 이름)"""

# =============================================================================
# 기본 파라미터
# =============================================================================


class DefaultParameters:
    """생성 요청 파라미터 기본값"""

    IMAGES: int = 1
    NEGATIVE_PROMPT: str = ""
    WIDTH: int = 1024
    HEIGHT: int = 768
    STEPS: int = 20
    CFG_SCALE: float = 7.0
    SAMPLER: str = "dpmpp_2m_sde"
    SCHEDULER: str = "normal"
    SEED: str = "-1"
    BATCH_SIZE: int = 1
    DO_NOT_SAVE: bool = True
    IMAGE_FORMAT: str = "PNG"
    INIT_IMAGE_CREATIVITY: float = 0.7
    LORA_WEIGHT: float = 1.0


# =============================================================================
# 검증 제약조건
# =============================================================================


class ValidationConstraints:
    """파라미터 검증 제약조건"""

    MIN_IMAGES: int = 1
    MIN_BATCH_SIZE: int = 1
    MIN_WIDTH: int = 1
    MIN_HEIGHT: int = 1
    MIN_STEPS: int = 1
    MIN_VAE_TILE_SIZE: int = 1

    MIN_INIT_IMAGE_CREATIVITY: float = 0.0
    MAX_INIT_IMAGE_CREATIVITY: float = 1.0

    VALID_IMAGE_FORMATS: tuple[str, ...] = ("PNG", "JPG", "WEBP_LOSSLESS", "WEBP_LOSSY")

    # Flux (BFL) 확장
    MIN_SAFETY_TOLERANCE: int = 0
    MAX_SAFETY_TOLERANCE: int = 5
    MIN_FLUX_GUIDANCE: float = 1.5
    MAX_FLUX_GUIDANCE: float = 10.0
    VALID_FLUX_OUTPUT_FORMATS: tuple[str, ...] = ("jpeg", "png")

    # OpenAI 호환
    MIN_OPENAI_N: int = 1
    MAX_OPENAI_N: int = 10
    VALID_OPENAI_QUALITIES: tuple[str, ...] = (
        "auto",
        "high",
        "medium",
        "low",
        "hd",
        "standard",
    )
    VALID_OPENAI_STYLES: tuple[str, ...] = ("vivid", "natural")
    VALID_OPENAI_BACKGROUNDS: tuple[str, ...] = ("auto", "transparent", "opaque")
    VALID_OPENAI_MODERATIONS: tuple[str, ...] = ("auto", "low")
    VALID_OPENAI_OUTPUT_FORMATS: tuple[str, ...] = ("png", "jpeg", "webp")

    # Ideogram 호환
    MIN_IDEOGRAM_NUM_IMAGES: int = 1
    MAX_IDEOGRAM_NUM_IMAGES: int = 8
    VALID_IDEOGRAM_RENDERING_SPEEDS: tuple[str, ...] = ("DEFAULT", "TURBO", "QUALITY")
    VALID_IDEOGRAM_MAGIC_PROMPTS: tuple[str, ...] = ("AUTO", "ON", "OFF")
    VALID_IDEOGRAM_STYLE_TYPES: tuple[str, ...] = (
        "GENERAL",
        "REALISTIC",
        "DESIGN",
        "RENDER_3D",
        "ANIME",
    )
    IDEOGRAM_STYLE_CODE_PATTERN: str = r"^[0-9A-Fa-f]{8}$"

    ASPECT_RATIO_PATTERN: str = r"^\d+:\d+$"

    # 문자열로 전송되는 숫자 필드 (ASCII 숫자만 허용)
    SEED_PATTERN: str = r"^-?\d+$"
    NUMERIC_STRING_PATTERN: str = r"^-?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$"
