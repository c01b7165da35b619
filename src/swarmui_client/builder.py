"""
생성 요청 빌더
체이닝 방식으로 GenerationRequest를 단계적으로 구성
"""

import logging
from pathlib import Path
from typing import Any, Optional

from .config import DefaultParameters
from .schemas.generation_request import GenerationRequest
from .serializer import to_wire
from .utils.image_utils import image_file_to_base64

logger = logging.getLogger(__name__)


class GenerationRequestBuilder:
    """
    GenerationRequest 빌더

    중간 단계에서는 검증하지 않습니다. build_wire() 호출 시 직렬화와 함께 검증됩니다.

    사용 예:
        payload = (
            GenerationRequestBuilder("a red fox")
            .size(512, 512)
            .steps(10)
            .lora("styleA", 0.8)
            .build_wire()
        )
    """

    def __init__(self, prompt: str = ""):
        self._request = GenerationRequest(prompt=prompt)

    def prompt(self, prompt: str) -> "GenerationRequestBuilder":
        self._request.prompt = prompt
        return self

    def negative_prompt(self, negative_prompt: Optional[str]) -> "GenerationRequestBuilder":
        self._request.negative_prompt = negative_prompt
        return self

    def size(self, width: int, height: int) -> "GenerationRequestBuilder":
        self._request.width = width
        self._request.height = height
        return self

    def steps(self, steps: int) -> "GenerationRequestBuilder":
        self._request.steps = steps
        return self

    def cfg_scale(self, cfg_scale: float) -> "GenerationRequestBuilder":
        self._request.cfg_scale = cfg_scale
        return self

    def sampler(
        self, sampler: str, scheduler: Optional[str] = None
    ) -> "GenerationRequestBuilder":
        """샘플러 설정 (scheduler를 주면 함께 변경)"""
        self._request.sampler = sampler
        if scheduler is not None:
            self._request.scheduler = scheduler
        return self

    def seed(self, seed: int | str) -> "GenerationRequestBuilder":
        self._request.seed = str(seed)
        return self

    def random_seed(self) -> "GenerationRequestBuilder":
        self._request.seed = DefaultParameters.SEED
        return self

    def style_preset(self, style_preset: Optional[str]) -> "GenerationRequestBuilder":
        self._request.style_preset = style_preset
        return self

    def batch_size(self, batch_size: int) -> "GenerationRequestBuilder":
        self._request.batch_size = batch_size
        return self

    def images(self, images: int) -> "GenerationRequestBuilder":
        self._request.images = images
        return self

    def save_on_server(self, save: bool = True) -> "GenerationRequestBuilder":
        self._request.do_not_save = not save
        return self

    def image_format(self, image_format: str) -> "GenerationRequestBuilder":
        self._request.image_format = image_format
        return self

    def model(self, model: Optional[str]) -> "GenerationRequestBuilder":
        self._request.model = model
        return self

    def lora(
        self, name: str, weight: float = DefaultParameters.LORA_WEIGHT
    ) -> "GenerationRequestBuilder":
        self._request.add_lora(name, weight)
        return self

    def init_image(
        self, base64_image: str, creativity: Optional[float] = None
    ) -> "GenerationRequestBuilder":
        """img2img 초기 이미지 설정 (Base64)"""
        self._request.init_image = base64_image
        if creativity is not None:
            self._request.init_image_creativity = creativity
        return self

    def init_image_file(
        self, file_path: str | Path, creativity: Optional[float] = None
    ) -> "GenerationRequestBuilder":
        """
        이미지 파일을 읽어 img2img 초기 이미지로 설정

        Raises:
            ImageProcessingError: 파일을 읽을 수 없거나 지원하지 않는 이미지
        """
        logger.debug(f"초기 이미지 로드: {file_path}")
        return self.init_image(image_file_to_base64(file_path), creativity)

    def advanced(self, **fields: Any) -> "GenerationRequestBuilder":
        """고급 샘플링 필드 설정 (sigma_shift, vae_tile_size 등)"""
        for name, value in fields.items():
            setattr(self._request, name, value)
        return self

    def flux(self, **fields: Any) -> "GenerationRequestBuilder":
        for name, value in fields.items():
            setattr(self._request.flux, name, value)
        return self

    def openai(self, **fields: Any) -> "GenerationRequestBuilder":
        for name, value in fields.items():
            setattr(self._request.openai, name, value)
        return self

    def ideogram(self, **fields: Any) -> "GenerationRequestBuilder":
        for name, value in fields.items():
            setattr(self._request.ideogram, name, value)
        return self

    def build(self) -> GenerationRequest:
        """현재 상태의 요청 사본 반환 (검증하지 않음)"""
        return self._request.model_copy(deep=True)

    def build_wire(
        self,
        enforce_exclusive: Optional[bool] = None,
        check_init_image: Optional[bool] = None,
    ) -> dict[str, Any]:
        """검증 후 와이어 딕셔너리 반환"""
        return to_wire(
            self._request,
            enforce_exclusive=enforce_exclusive,
            check_init_image=check_init_image,
        )
