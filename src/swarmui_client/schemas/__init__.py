"""
schemas 패키지
생성 요청 Pydantic 모델과 와이어 이름 테이블
"""

from .generation_request import (
    FluxOptions,
    GenerationRequest,
    IdeogramOptions,
    LoraAdjustment,
    OpenAIOptions,
)
from .wire_names import (
    CORE_WIRE_NAMES,
    FLUX_WIRE_NAMES,
    GROUP_WIRE_NAMES,
    IDEOGRAM_WIRE_NAMES,
    OPENAI_WIRE_NAMES,
    all_wire_names,
    wire_name,
)

__all__ = [
    "GenerationRequest",
    "LoraAdjustment",
    "FluxOptions",
    "OpenAIOptions",
    "IdeogramOptions",
    "CORE_WIRE_NAMES",
    "FLUX_WIRE_NAMES",
    "OPENAI_WIRE_NAMES",
    "IDEOGRAM_WIRE_NAMES",
    "GROUP_WIRE_NAMES",
    "wire_name",
    "all_wire_names",
]
