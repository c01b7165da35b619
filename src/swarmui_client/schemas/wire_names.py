"""
wire_names.py
파이썬 필드 이름 -> 와이어 키 매핑 테이블

이 테이블은 서버와의 호환 규약입니다. 직렬화는 이 테이블만 참조하며,
테이블에 없는 필드는 파이썬 이름으로 대체되지 않고 KeyError가 발생합니다.
"""

from typing import Final

CORE_WIRE_NAMES: Final[dict[str, str]] = {
    "images": "images",
    "prompt": "prompt",
    "negative_prompt": "negativeprompt",
    "width": "width",
    "height": "height",
    "steps": "steps",
    "cfg_scale": "cfgscale",
    "sampler": "sampler",
    "scheduler": "scheduler",
    "seed": "seed",
    "style_preset": "stylepreset",
    "batch_size": "batchsize",
    "do_not_save": "donotsave",
    "image_format": "imageformat",
    "model": "model",
    "loras": "loras",
    "init_image": "initimage",
    "init_image_creativity": "initimagecreativity",
    "flux_guidance_scale": "fluxguidancescale",
    "sigma_shift": "sigmashift",
    "clip_stop_at_layer": "clipstopatlayer",
    "vae_tile_size": "vaetilesize",
    "sampler_sigma_min": "samplersigmamin",
    "sampler_sigma_max": "samplersigmamax",
    "sampler_rho": "samplerrho",
    "zero_negative": "zeronegative",
}
"""코어 필드 (접두사 없음)"""

FLUX_WIRE_NAMES: Final[dict[str, str]] = {
    "safety_tolerance": "safetytolerance",
    "output_format": "outputformat",
    "guidance": "guidance",
    "prompt_upsampling": "promptupsampling",
    "webhook_url": "webhookurl",
    "webhook_secret": "webhooksecret",
    "aspect_ratio": "aspectratio",
}
"""Flux(BFL) 확장 필드 (접두사 없음, 코어와 같은 네임스페이스)"""

OPENAI_WIRE_NAMES: Final[dict[str, str]] = {
    "quality": "openai_quality",
    "style": "openai_style",
    "size": "openai_size",
    "background": "openai_background",
    "moderation": "openai_moderation",
    "output_format": "openai_output_format",
    "n": "openai_n",
}
"""OpenAI 호환 확장 필드 ('openai_' 접두사)"""

IDEOGRAM_WIRE_NAMES: Final[dict[str, str]] = {
    "resolution": "ideogram_resolution",
    "aspect_ratio": "ideogram_aspect_ratio",
    "rendering_speed": "ideogram_rendering_speed",
    "magic_prompt": "ideogram_magic_prompt",
    "negative_prompt": "ideogram_negative_prompt",
    "num_images": "ideogram_num_images",
    "color_palette": "ideogram_color_palette",
    "style_codes": "ideogram_style_codes",
    "style_type": "ideogram_style_type",
    "style_preset": "ideogram_style_preset",
}
"""Ideogram 호환 확장 필드 ('ideogram_' 접두사)"""

GROUP_WIRE_NAMES: Final[dict[str, dict[str, str]]] = {
    "flux": FLUX_WIRE_NAMES,
    "openai": OPENAI_WIRE_NAMES,
    "ideogram": IDEOGRAM_WIRE_NAMES,
}
"""GenerationRequest의 그룹 속성 이름 -> 해당 그룹 테이블"""


def wire_name(field: str, group: str | None = None) -> str:
    """
    필드의 와이어 키 조회

    Args:
        field: 파이썬 필드 이름
        group: 백엔드 그룹 속성 이름 ("flux", "openai", "ideogram"). None이면 코어 필드

    Returns:
        와이어 키

    Raises:
        KeyError: 테이블에 등록되지 않은 필드
    """
    table = CORE_WIRE_NAMES if group is None else GROUP_WIRE_NAMES[group]
    return table[field]


def all_wire_names() -> list[str]:
    """모든 와이어 키 목록 (코어 + 그룹, 선언 순서)"""
    names = list(CORE_WIRE_NAMES.values())
    for table in GROUP_WIRE_NAMES.values():
        names.extend(table.values())
    return names
