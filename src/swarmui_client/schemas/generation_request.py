"""
generation_request.py
SwarmUI 생성 요청 스키마 정의

필드 도메인 검증은 직렬화 시점(serializer.to_wire)에 수행합니다.
생성자는 파이썬 타입만 확인하므로, 부분적으로 채워진 요청도 유효한 중간 상태입니다.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import DefaultParameters


def _numeric_to_str(value: Any) -> Any:
    """정수/실수로 전달된 값을 문자열로 변환 (bool은 제외)"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class LoraAdjustment(BaseModel):
    """베이스 모델 위에 적용할 LoRA 가중치 조정"""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(
        ...,
        title="LoRA 이름",
        description="SwarmUI 인스턴스에 설치된 LoRA 파일 이름 또는 경로",
    )
    weight: float = Field(
        DefaultParameters.LORA_WEIGHT,
        title="LoRA 가중치",
        description="LoRA 효과 강도 (보통 0.5~1.5)",
    )


# =============================================================================
# 백엔드 확장 그룹
# =============================================================================


class FluxOptions(BaseModel):
    """
    Flux(BFL) 백엔드 전용 파라미터

    API Backends 확장을 통해 Flux 모델을 호출할 때만 의미가 있습니다.
    와이어에서는 접두사 없이 코어 필드와 같은 네임스페이스를 공유합니다.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    safety_tolerance: Optional[int] = Field(
        None,
        title="안전성 허용 수준",
        description="0 = 가장 엄격, 5 = 가장 관대 (서버 기본값 2)",
    )
    output_format: Optional[str] = Field(
        None, title="출력 포맷", description="jpeg 또는 png"
    )
    guidance: Optional[float] = Field(
        None,
        title="가이던스",
        description="FLUX.2 [flex] 프롬프트 준수 강도. 1.5~10 (서버 기본값 4.5)",
    )
    prompt_upsampling: Optional[bool] = Field(None, title="프롬프트 업샘플링")
    webhook_url: Optional[str] = Field(None, title="웹훅 URL")
    webhook_secret: Optional[str] = Field(None, title="웹훅 시크릿")
    aspect_ratio: Optional[str] = Field(
        None, title="종횡비", description="'W:H' 형식 (예: '1:1', '16:9')"
    )


class OpenAIOptions(BaseModel):
    """
    OpenAI 호환 백엔드 전용 파라미터 (DALL-E 2/3, GPT-Image)

    와이어에서는 모든 필드가 'openai_' 접두사를 가집니다.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    quality: Optional[str] = Field(
        None,
        title="품질",
        description="GPT: auto/high/medium/low, DALL-E 3: hd/standard, DALL-E 2: standard",
    )
    style: Optional[str] = Field(
        None, title="스타일", description="DALL-E 3 전용. vivid 또는 natural"
    )
    size: Optional[str] = Field(
        None, title="이미지 크기", description="모델마다 허용 값이 다름"
    )
    background: Optional[str] = Field(
        None, title="배경 투명도", description="auto/transparent/opaque"
    )
    moderation: Optional[str] = Field(
        None, title="콘텐츠 검열 수준", description="auto/low"
    )
    output_format: Optional[str] = Field(
        None, title="출력 포맷", description="png/jpeg/webp"
    )
    n: Optional[int] = Field(
        None, title="생성 이미지 수", description="1~10 (DALL-E 3는 1만 지원)"
    )


class IdeogramOptions(BaseModel):
    """
    Ideogram 호환 백엔드 전용 파라미터 (V1 ~ V3)

    와이어에서는 모든 필드가 'ideogram_' 접두사를 가집니다.
    resolution과 aspect_ratio, style_codes와 style_type은 서버 규약상 함께 쓸 수 없습니다.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    resolution: Optional[str] = Field(
        None, title="해상도 프리셋", description="V3 전용 (예: '1024x1024')"
    )
    aspect_ratio: Optional[str] = Field(
        None, title="종횡비", description="예: '1:1', '16:9' (기본값 1:1)"
    )
    rendering_speed: Optional[str] = Field(
        None, title="렌더링 속도", description="DEFAULT/TURBO/QUALITY"
    )
    magic_prompt: Optional[str] = Field(
        None, title="MagicPrompt 모드", description="AUTO/ON/OFF"
    )
    negative_prompt: Optional[str] = Field(None, title="부정 프롬프트")
    num_images: Optional[int] = Field(
        None, title="생성 이미지 수", description="1~8 (기본값 1)"
    )
    color_palette: Optional[str] = Field(
        None, title="색상 팔레트 프리셋", description="예: 'EMBER', 'FRESH', 'JUNGLE'"
    )
    style_codes: Optional[list[str]] = Field(
        None, title="스타일 코드", description="8자리 16진수 코드 목록 (순서 유지)"
    )
    style_type: Optional[str] = Field(
        None,
        title="스타일 유형",
        description="GENERAL/REALISTIC/DESIGN/RENDER_3D/ANIME",
    )
    style_preset: Optional[str] = Field(None, title="스타일 프리셋")


# =============================================================================
# 생성 요청
# =============================================================================


class GenerationRequest(BaseModel):
    """
    이미지 생성 요청 스키마

    한 번의 생성 호출에 필요한 전체 파라미터 집합입니다.
    모든 필드는 독립적으로 설정할 수 있고, 검증은 직렬화 시점으로 미뤄집니다.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "prompt": "a red fox in the snow, golden hour",
                "width": 512,
                "height": 512,
                "steps": 10,
                "loras": [{"name": "styleA", "weight": 0.8}],
            }
        },
    )

    # 코어 파라미터 (모든 백엔드 공통)
    images: int = Field(
        DefaultParameters.IMAGES,
        title="이미지 수 (레거시)",
        description="호환성을 위해 유지되는 필드. batch_size와 별개로 전송됩니다.",
    )
    prompt: str = Field(
        "",
        title="프롬프트",
        description="생성할 이미지에 대한 설명. 직렬화 시 비어 있으면 안 됩니다.",
    )
    negative_prompt: Optional[str] = Field(
        DefaultParameters.NEGATIVE_PROMPT,
        title="부정 프롬프트",
        description="생성 결과에서 배제할 요소",
    )
    width: int = Field(DefaultParameters.WIDTH, title="너비 (픽셀)")
    height: int = Field(DefaultParameters.HEIGHT, title="높이 (픽셀)")
    steps: int = Field(DefaultParameters.STEPS, title="디노이징 스텝 수")
    cfg_scale: float = Field(
        DefaultParameters.CFG_SCALE,
        title="CFG 스케일",
        description="프롬프트 준수 강도. Flux 계열은 보통 더 낮은 값을 사용합니다.",
    )
    sampler: str = Field(DefaultParameters.SAMPLER, title="샘플러")
    scheduler: Optional[str] = Field(DefaultParameters.SCHEDULER, title="스케줄러")
    seed: Optional[str] = Field(
        DefaultParameters.SEED,
        title="랜덤 시드",
        description="부호 있는 정수 문자열. '-1'이면 서버가 무작위로 선택합니다.",
    )
    style_preset: Optional[str] = Field(None, title="스타일 프리셋")
    batch_size: int = Field(
        DefaultParameters.BATCH_SIZE,
        title="배치 크기",
        description="GPU 백엔드에서 병렬로 생성할 이미지 수",
    )
    do_not_save: bool = Field(
        DefaultParameters.DO_NOT_SAVE,
        title="서버 저장 안 함",
        description="True이면 결과 이미지를 서버 출력 폴더에 저장하지 않습니다.",
    )
    image_format: str = Field(
        DefaultParameters.IMAGE_FORMAT,
        title="출력 이미지 포맷",
        description="PNG/JPG/WEBP_LOSSLESS/WEBP_LOSSY",
    )
    model: Optional[str] = Field(
        None, title="모델", description="SwarmUI 인스턴스에 있는 모델 이름 또는 경로"
    )

    # LoRA
    loras: Optional[list[LoraAdjustment]] = Field(
        default_factory=list,
        title="LoRA 목록",
        description="순서대로 적용되는 LoRA 조정. 중복 이름 허용.",
    )

    # img2img
    init_image: Optional[str] = Field(
        None,
        title="초기 이미지 (Base64)",
        description="설정되면 img2img 모드로 전환됩니다.",
    )
    init_image_creativity: float = Field(
        DefaultParameters.INIT_IMAGE_CREATIVITY,
        title="초기 이미지 변형 강도",
        description="0.0 (원본 유지) ~ 1.0 (완전 재생성). init_image가 없으면 무시됩니다.",
    )

    # 고급 샘플링 (None = 서버 기본값)
    flux_guidance_scale: Optional[str] = Field(
        None, title="Flux 가이던스 스케일", description="숫자 문자열"
    )
    sigma_shift: Optional[float] = Field(
        None,
        title="시그마 시프트",
        description="SD3: 1.5~3, AuraFlow: 1.73, Flux-Dev: ~1.15",
    )
    clip_stop_at_layer: Optional[int] = Field(
        None, title="CLIP 정지 레이어", description="SD1.5 전용. 기본 -1"
    )
    vae_tile_size: Optional[int] = Field(None, title="VAE 타일 크기 (픽셀)")
    sampler_sigma_min: Optional[float] = Field(None, title="최소 시그마")
    sampler_sigma_max: Optional[float] = Field(None, title="최대 시그마")
    sampler_rho: Optional[float] = Field(None, title="Rho")
    zero_negative: Optional[bool] = Field(
        None, title="부정 프롬프트 제로화", description="SD3에서 품질이 좋아질 수 있음"
    )

    # 백엔드 확장 그룹 (model이 선택한 백엔드의 그룹만 의미가 있음)
    flux: FluxOptions = Field(default_factory=FluxOptions, title="Flux 확장")
    openai: OpenAIOptions = Field(default_factory=OpenAIOptions, title="OpenAI 확장")
    ideogram: IdeogramOptions = Field(
        default_factory=IdeogramOptions, title="Ideogram 확장"
    )

    @field_validator("seed", "flux_guidance_scale", mode="before")
    @classmethod
    def coerce_numeric_string(cls, v):
        """숫자로 전달된 값을 문자열로 보관"""
        return _numeric_to_str(v)

    @property
    def is_img2img(self) -> bool:
        return bool(self.init_image)

    def add_lora(
        self, name: str, weight: float = DefaultParameters.LORA_WEIGHT
    ) -> "GenerationRequest":
        """LoRA를 목록 끝에 추가하고 자기 자신을 반환"""
        if self.loras is None:
            self.loras = []
        self.loras.append(LoraAdjustment(name=name, weight=weight))
        return self
