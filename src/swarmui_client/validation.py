"""
생성 요청 검증
필수 필드, 수치 범위, 열거형 문자열 도메인 검사 및 상호 배타 필드 탐지
"""

import logging
import math
import re
from typing import Any, Optional

from .config import VALIDATE_INIT_IMAGE
from .config import ValidationConstraints as VC
from .errors import (
    GenerationRequestError,
    MissingRequiredFieldError,
    OutOfRangeValueError,
)
from .schemas.generation_request import GenerationRequest
from .schemas.wire_names import wire_name
from .utils.image_utils import validate_base64_image

logger = logging.getLogger(__name__)

# 서버 규약상 함께 쓸 수 없는 (그룹, 필드) 쌍
EXCLUSIVE_FIELD_PAIRS: tuple[tuple[tuple[str, str], tuple[str, str]], ...] = (
    (("ideogram", "resolution"), ("ideogram", "aspect_ratio")),
    (("ideogram", "style_codes"), ("ideogram", "style_type")),
)

_STYLE_CODE_RE = re.compile(VC.IDEOGRAM_STYLE_CODE_PATTERN, re.ASCII)
_ASPECT_RATIO_RE = re.compile(VC.ASPECT_RATIO_PATTERN, re.ASCII)
_SEED_RE = re.compile(VC.SEED_PATTERN, re.ASCII)
_NUMERIC_STRING_RE = re.compile(VC.NUMERIC_STRING_PATTERN, re.ASCII)


def _min(
    errors: list, field: str, value: Optional[float], minimum: float
) -> None:
    if value is not None and value < minimum:
        errors.append(OutOfRangeValueError(field, value, f">= {minimum}"))


def _range(
    errors: list,
    field: str,
    value: Optional[float],
    minimum: float,
    maximum: float,
) -> None:
    if value is not None and not (minimum <= value <= maximum):
        errors.append(OutOfRangeValueError(field, value, f"[{minimum}, {maximum}]"))


def _finite(errors: list, field: str, value: Optional[float]) -> None:
    # NaN/Infinity는 JSON으로 표현할 수 없음
    if value is not None and not math.isfinite(value):
        errors.append(OutOfRangeValueError(field, value, "finite number"))


def _choice(
    errors: list, field: str, value: Optional[str], choices: tuple[str, ...]
) -> None:
    if value is not None and value not in choices:
        errors.append(OutOfRangeValueError(field, value, f"one of {', '.join(choices)}"))


def _pattern(
    errors: list,
    field: str,
    value: Optional[str],
    pattern: re.Pattern,
    constraint: str,
) -> bool:
    if value is not None and not pattern.fullmatch(value):
        errors.append(OutOfRangeValueError(field, value, constraint))
        return False
    return True


def _check_init_image(request: GenerationRequest, errors: list) -> None:
    is_valid, message = validate_base64_image(request.init_image)
    if not is_valid:
        # 본문 전체 대신 길이만 기록
        errors.append(
            OutOfRangeValueError(
                wire_name("init_image"), f"<{len(request.init_image)} chars>", message
            )
        )


def _check_core(
    request: GenerationRequest, errors: list, check_init_image: bool
) -> None:
    w = wire_name

    if not request.prompt or not request.prompt.strip():
        errors.append(MissingRequiredFieldError(w("prompt")))

    _min(errors, w("images"), request.images, VC.MIN_IMAGES)
    _min(errors, w("width"), request.width, VC.MIN_WIDTH)
    _min(errors, w("height"), request.height, VC.MIN_HEIGHT)
    _min(errors, w("steps"), request.steps, VC.MIN_STEPS)
    _finite(errors, w("cfg_scale"), request.cfg_scale)
    _pattern(errors, w("seed"), request.seed, _SEED_RE, "signed integer string")
    _min(errors, w("batch_size"), request.batch_size, VC.MIN_BATCH_SIZE)
    _choice(errors, w("image_format"), request.image_format, VC.VALID_IMAGE_FORMATS)

    for index, lora in enumerate(request.loras or []):
        if not lora.name or not lora.name.strip():
            errors.append(MissingRequiredFieldError(f"{w('loras')}[{index}].name"))
        _finite(errors, f"{w('loras')}[{index}].weight", lora.weight)

    if check_init_image and request.init_image:
        _check_init_image(request, errors)
    _range(
        errors,
        w("init_image_creativity"),
        request.init_image_creativity,
        VC.MIN_INIT_IMAGE_CREATIVITY,
        VC.MAX_INIT_IMAGE_CREATIVITY,
    )

    if _pattern(
        errors,
        w("flux_guidance_scale"),
        request.flux_guidance_scale,
        _NUMERIC_STRING_RE,
        "numeric string",
    ) and request.flux_guidance_scale is not None:
        # '1e999'처럼 형식은 맞지만 무한대가 되는 값
        if not math.isfinite(float(request.flux_guidance_scale)):
            errors.append(
                OutOfRangeValueError(
                    w("flux_guidance_scale"), request.flux_guidance_scale, "finite number"
                )
            )
    _finite(errors, w("sigma_shift"), request.sigma_shift)
    _min(errors, w("vae_tile_size"), request.vae_tile_size, VC.MIN_VAE_TILE_SIZE)
    _finite(errors, w("sampler_sigma_min"), request.sampler_sigma_min)
    _finite(errors, w("sampler_sigma_max"), request.sampler_sigma_max)
    _finite(errors, w("sampler_rho"), request.sampler_rho)


def _check_flux(request: GenerationRequest, errors: list) -> None:
    flux = request.flux

    def w(field: str) -> str:
        return wire_name(field, "flux")

    _range(
        errors,
        w("safety_tolerance"),
        flux.safety_tolerance,
        VC.MIN_SAFETY_TOLERANCE,
        VC.MAX_SAFETY_TOLERANCE,
    )
    _choice(errors, w("output_format"), flux.output_format, VC.VALID_FLUX_OUTPUT_FORMATS)
    _range(
        errors, w("guidance"), flux.guidance, VC.MIN_FLUX_GUIDANCE, VC.MAX_FLUX_GUIDANCE
    )
    _pattern(errors, w("aspect_ratio"), flux.aspect_ratio, _ASPECT_RATIO_RE, "W:H")


def _check_openai(request: GenerationRequest, errors: list) -> None:
    openai = request.openai

    def w(field: str) -> str:
        return wire_name(field, "openai")

    _choice(errors, w("quality"), openai.quality, VC.VALID_OPENAI_QUALITIES)
    _choice(errors, w("style"), openai.style, VC.VALID_OPENAI_STYLES)
    _choice(errors, w("background"), openai.background, VC.VALID_OPENAI_BACKGROUNDS)
    _choice(errors, w("moderation"), openai.moderation, VC.VALID_OPENAI_MODERATIONS)
    _choice(
        errors, w("output_format"), openai.output_format, VC.VALID_OPENAI_OUTPUT_FORMATS
    )
    _range(errors, w("n"), openai.n, VC.MIN_OPENAI_N, VC.MAX_OPENAI_N)


def _check_ideogram(request: GenerationRequest, errors: list) -> None:
    ideogram = request.ideogram

    def w(field: str) -> str:
        return wire_name(field, "ideogram")

    _choice(
        errors,
        w("rendering_speed"),
        ideogram.rendering_speed,
        VC.VALID_IDEOGRAM_RENDERING_SPEEDS,
    )
    _choice(
        errors, w("magic_prompt"), ideogram.magic_prompt, VC.VALID_IDEOGRAM_MAGIC_PROMPTS
    )
    _range(
        errors,
        w("num_images"),
        ideogram.num_images,
        VC.MIN_IDEOGRAM_NUM_IMAGES,
        VC.MAX_IDEOGRAM_NUM_IMAGES,
    )
    for index, code in enumerate(ideogram.style_codes or []):
        _pattern(
            errors, f"{w('style_codes')}[{index}]", code, _STYLE_CODE_RE, "8-char hex"
        )
    _choice(
        errors, w("style_type"), ideogram.style_type, VC.VALID_IDEOGRAM_STYLE_TYPES
    )


def collect_errors(
    request: GenerationRequest, check_init_image: Optional[bool] = None
) -> list[GenerationRequestError]:
    """
    요청의 모든 검증 에러 수집

    Args:
        request: 검사할 생성 요청
        check_init_image: initimage를 디코딩해 실제 이미지인지 확인할지 여부
            (None이면 SWARMUI_VALIDATE_INIT_IMAGE 설정을 따름)

    Returns:
        에러 목록 (필드 카탈로그 순서, prompt가 항상 먼저). 유효하면 빈 리스트
    """
    if check_init_image is None:
        check_init_image = VALIDATE_INIT_IMAGE

    errors: list[GenerationRequestError] = []
    _check_core(request, errors, check_init_image)
    _check_flux(request, errors)
    _check_openai(request, errors)
    _check_ideogram(request, errors)
    return errors


def validate_request(
    request: GenerationRequest, check_init_image: Optional[bool] = None
) -> None:
    """
    요청 검증 (첫 번째 에러에서 실패)

    Raises:
        MissingRequiredFieldError: 필수 필드 누락
        OutOfRangeValueError: 도메인을 벗어난 값
    """
    errors = collect_errors(request, check_init_image=check_init_image)
    if errors:
        logger.debug(f"요청 검증 실패: {len(errors)}건, 첫 에러={errors[0].message}")
        raise errors[0]


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, str)) and not value:
        return False
    return True


def find_conflicts(request: GenerationRequest) -> list[tuple[str, str]]:
    """
    함께 설정된 상호 배타 필드 쌍 탐지

    스키마는 이런 요청을 허용합니다. 거부 여부는 호출자(또는 서버)가 결정합니다.

    Returns:
        충돌한 (와이어 키, 와이어 키) 쌍 목록
    """
    conflicts = []
    for (group_a, field_a), (group_b, field_b) in EXCLUSIVE_FIELD_PAIRS:
        value_a = getattr(getattr(request, group_a), field_a)
        value_b = getattr(getattr(request, group_b), field_b)
        if _is_set(value_a) and _is_set(value_b):
            conflicts.append(
                (wire_name(field_a, group_a), wire_name(field_b, group_b))
            )
    return conflicts
