"""
SwarmUI 생성 요청 클라이언트 모듈
텍스트-이미지 생성 요청 스키마와 와이어 포맷 직렬화
"""

import logging

from .builder import GenerationRequestBuilder
from .errors import (
    ConflictingFieldsError,
    GenerationRequestError,
    MissingRequiredFieldError,
    OutOfRangeValueError,
    UnknownWireFieldError,
)
from .schemas import (
    FluxOptions,
    GenerationRequest,
    IdeogramOptions,
    LoraAdjustment,
    OpenAIOptions,
)
from .serializer import from_wire, to_json, to_wire
from .validation import collect_errors, find_conflicts, validate_request

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "GenerationRequest",
    "GenerationRequestBuilder",
    "LoraAdjustment",
    "FluxOptions",
    "OpenAIOptions",
    "IdeogramOptions",
    "to_wire",
    "to_json",
    "from_wire",
    "validate_request",
    "collect_errors",
    "find_conflicts",
    "GenerationRequestError",
    "MissingRequiredFieldError",
    "OutOfRangeValueError",
    "ConflictingFieldsError",
    "UnknownWireFieldError",
]
