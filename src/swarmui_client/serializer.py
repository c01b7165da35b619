"""
생성 요청 직렬화
GenerationRequest <-> 평면 와이어 딕셔너리 변환
"""

import json
import logging
from typing import Any, Mapping, Optional

from .config import ENFORCE_EXCLUSIVE_FIELDS
from .errors import ConflictingFieldsError, UnknownWireFieldError
from .schemas.generation_request import GenerationRequest, LoraAdjustment
from .schemas.wire_names import CORE_WIRE_NAMES, GROUP_WIRE_NAMES
from .validation import find_conflicts, validate_request

logger = logging.getLogger(__name__)

# initimagecreativity는 initimage와 함께일 때만 전송
_INIT_IMAGE_DEPENDENTS = {"init_image_creativity"}


def _snapshot(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    return value


def to_wire(
    request: GenerationRequest,
    enforce_exclusive: Optional[bool] = None,
    check_init_image: Optional[bool] = None,
) -> dict[str, Any]:
    """
    생성 요청을 와이어 포맷 딕셔너리로 변환

    값이 None인 필드는 전송하지 않아 서버 기본값이 적용되도록 합니다.
    반환값은 요청과 독립된 스냅샷입니다.

    Args:
        request: 생성 요청
        enforce_exclusive: 상호 배타 필드 동시 설정 시 거부 여부
            (None이면 SWARMUI_ENFORCE_EXCLUSIVE_FIELDS 설정을 따름)
        check_init_image: initimage가 실제 이미지인지 디코딩해 확인할지 여부
            (None이면 SWARMUI_VALIDATE_INIT_IMAGE 설정을 따름)

    Returns:
        JSON 인코딩 가능한 평면 딕셔너리

    Raises:
        MissingRequiredFieldError: prompt가 비어 있음
        OutOfRangeValueError: 도메인을 벗어난 값
        ConflictingFieldsError: 배타 필드 충돌 (enforce_exclusive=True일 때만)
    """
    validate_request(request, check_init_image=check_init_image)

    if enforce_exclusive is None:
        enforce_exclusive = ENFORCE_EXCLUSIVE_FIELDS

    for conflict in find_conflicts(request):
        if enforce_exclusive:
            raise ConflictingFieldsError(conflict)
        logger.warning(
            f"함께 사용할 수 없는 필드가 모두 설정됨: {conflict[0]}, {conflict[1]} "
            "(서버 규약에 따라 처리됩니다)"
        )

    payload: dict[str, Any] = {}

    for field, key in CORE_WIRE_NAMES.items():
        if field == "loras":
            if request.loras:
                payload[key] = [
                    {"name": lora.name, "weight": lora.weight} for lora in request.loras
                ]
            continue
        if field in _INIT_IMAGE_DEPENDENTS and not request.init_image:
            continue
        value = getattr(request, field)
        if value is not None:
            payload[key] = _snapshot(value)

    for group_name, table in GROUP_WIRE_NAMES.items():
        group = getattr(request, group_name)
        for field in type(group).model_fields:
            value = getattr(group, field)
            if value is None or value == []:
                continue
            payload[table[field]] = _snapshot(value)

    logger.debug(
        f"요청 직렬화 완료: model={request.model}, keys={len(payload)}, "
        f"loras={len(request.loras or [])}, img2img={request.is_img2img}"
    )
    return payload


def to_json(request: GenerationRequest, **kwargs) -> str:
    """
    생성 요청을 JSON 문자열로 변환

    Args:
        request: 생성 요청
        **kwargs: json.dumps 옵션 (indent 등)
    """
    kwargs.setdefault("ensure_ascii", False)
    kwargs.setdefault("allow_nan", False)
    return json.dumps(to_wire(request), **kwargs)


def from_wire(payload: Mapping[str, Any]) -> GenerationRequest:
    """
    와이어 포맷 딕셔너리를 생성 요청으로 복원

    검증은 수행하지 않습니다. 복원된 요청을 다시 to_wire로 보내면 검증됩니다.

    Args:
        payload: 와이어 딕셔너리 (to_wire의 출력 또는 서버 형식의 JSON)

    Returns:
        GenerationRequest

    Raises:
        UnknownWireFieldError: 테이블에 없는 키
    """
    core_lookup = {key: field for field, key in CORE_WIRE_NAMES.items()}
    group_lookup = {
        key: (group_name, field)
        for group_name, table in GROUP_WIRE_NAMES.items()
        for field, key in table.items()
    }

    core: dict[str, Any] = {}
    groups: dict[str, dict[str, Any]] = {name: {} for name in GROUP_WIRE_NAMES}

    for key, value in payload.items():
        if key in core_lookup:
            field = core_lookup[key]
            if field == "loras":
                value = [LoraAdjustment.model_validate(item) for item in value or []]
            core[field] = value
        elif key in group_lookup:
            group_name, field = group_lookup[key]
            groups[group_name][field] = value
        else:
            raise UnknownWireFieldError(key)

    return GenerationRequest(**core, **groups)
