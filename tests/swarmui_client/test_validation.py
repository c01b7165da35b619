"""
요청 검증 단위 테스트
"""

import base64

import pytest
from pydantic import ValidationError

from swarmui_client.errors import (
    GenerationRequestError,
    MissingRequiredFieldError,
    OutOfRangeValueError,
)
from swarmui_client.schemas.generation_request import GenerationRequest
from swarmui_client.serializer import to_wire
from swarmui_client.validation import (
    collect_errors,
    find_conflicts,
    validate_request,
)


def test_default_request_is_legal_intermediate_state():
    """생성 시점에는 검증하지 않으므로 빈 요청도 만들 수 있음"""
    request = GenerationRequest(batch_size=0, init_image_creativity=5.0)

    assert request.prompt == ""
    assert request.batch_size == 0


def test_constructor_rejects_unknown_fields():
    """오타가 난 필드 이름은 생성 시점에 거부"""
    with pytest.raises(ValidationError):
        GenerationRequest(prompt="a red fox", cfgscale=5.0)


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
def test_empty_prompt_raises_missing_field(prompt):
    request = GenerationRequest(prompt=prompt)

    with pytest.raises(MissingRequiredFieldError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == "prompt"
    assert "필수 필드가 비어 있습니다" in str(exc_info.value)


def test_empty_prompt_reported_first_regardless_of_other_fields():
    """다른 필드가 잘못되어도 prompt 누락이 먼저 보고됨"""
    request = GenerationRequest(prompt="", batch_size=0, width=-1, steps=0)
    request.openai.n = 50

    with pytest.raises(MissingRequiredFieldError):
        to_wire(request)


@pytest.mark.parametrize("batch_size", [0, -1, -100])
def test_batch_size_below_one_is_rejected(batch_size):
    request = GenerationRequest(prompt="a red fox", batch_size=batch_size)

    with pytest.raises(OutOfRangeValueError) as exc_info:
        to_wire(request)

    assert exc_info.value.field == "batchsize"
    assert exc_info.value.value == batch_size


@pytest.mark.parametrize(
    "field, wire_key",
    [
        ("width", "width"),
        ("height", "height"),
        ("steps", "steps"),
        ("images", "images"),
    ],
)
def test_non_positive_dimensions_are_rejected(field, wire_key):
    request = GenerationRequest(prompt="a red fox", **{field: 0})

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == wire_key


@pytest.mark.parametrize("creativity", [-0.1, 1.01, 7.0])
def test_init_image_creativity_out_of_range(creativity):
    request = GenerationRequest(prompt="a red fox", init_image_creativity=creativity)

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == "initimagecreativity"
    assert exc_info.value.constraint == "[0.0, 1.0]"


@pytest.mark.parametrize("creativity", [0.0, 0.5, 1.0])
def test_init_image_creativity_bounds_are_inclusive(creativity):
    request = GenerationRequest(prompt="a red fox", init_image_creativity=creativity)

    validate_request(request)


@pytest.mark.parametrize("seed", ["abc", "1.5", "", "1_000", "\u0661\u0662\u0663", "12\n"])
def test_seed_must_be_integer_string(seed):
    request = GenerationRequest(prompt="a red fox", seed=seed)

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == "seed"


@pytest.mark.parametrize("seed", ["-1", "0", "123456789", -42])
def test_valid_seeds(seed):
    validate_request(GenerationRequest(prompt="a red fox", seed=seed))


@pytest.mark.parametrize("value", ["fast", "nan", "inf", "1_0", "1e999", "\uff13.5"])
def test_flux_guidance_scale_must_be_numeric(value):
    request = GenerationRequest(prompt="a red fox", flux_guidance_scale=value)

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == "fluxguidancescale"


def test_image_format_must_be_known():
    request = GenerationRequest(prompt="a red fox", image_format="GIF")

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == "imageformat"


def test_lora_without_name_is_missing_field(basic_request):
    basic_request.add_lora("styleA").add_lora("")

    with pytest.raises(MissingRequiredFieldError) as exc_info:
        validate_request(basic_request)

    assert exc_info.value.field == "loras[1].name"


@pytest.mark.parametrize(
    "group, field, value, wire_key",
    [
        ("flux", "safety_tolerance", 6, "safetytolerance"),
        ("flux", "safety_tolerance", -1, "safetytolerance"),
        ("flux", "guidance", 1.0, "guidance"),
        ("flux", "guidance", 10.5, "guidance"),
        ("flux", "output_format", "webp", "outputformat"),
        ("flux", "aspect_ratio", "wide", "aspectratio"),
        ("openai", "n", 0, "openai_n"),
        ("openai", "n", 11, "openai_n"),
        ("openai", "quality", "ultra", "openai_quality"),
        ("openai", "style", "anime", "openai_style"),
        ("openai", "background", "none", "openai_background"),
        ("openai", "moderation", "high", "openai_moderation"),
        ("openai", "output_format", "gif", "openai_output_format"),
        ("ideogram", "num_images", 9, "ideogram_num_images"),
        ("ideogram", "rendering_speed", "SLOW", "ideogram_rendering_speed"),
        ("ideogram", "magic_prompt", "MAYBE", "ideogram_magic_prompt"),
        ("ideogram", "style_type", "PIXEL", "ideogram_style_type"),
    ],
)
def test_group_domains(basic_request, group, field, value, wire_key):
    """백엔드 그룹 필드의 도메인 검사"""
    setattr(getattr(basic_request, group), field, value)

    with pytest.raises(OutOfRangeValueError) as exc_info:
        to_wire(basic_request)

    assert exc_info.value.field == wire_key


@pytest.mark.parametrize("code", ["ABC", "GGGGGGGG", "0123456789"])
def test_ideogram_style_codes_must_be_hex8(basic_request, code):
    basic_request.ideogram.style_codes = ["0123ABCD", code]

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(basic_request)

    assert exc_info.value.field == "ideogram_style_codes[1]"


def test_group_boundaries_are_accepted(basic_request):
    basic_request.flux.safety_tolerance = 0
    basic_request.flux.guidance = 10.0
    basic_request.openai.n = 10
    basic_request.ideogram.num_images = 8

    validate_request(basic_request)


def test_collect_errors_reports_everything():
    request = GenerationRequest(prompt="", batch_size=0, steps=-5)
    request.openai.n = 20

    errors = collect_errors(request)

    assert [e.field for e in errors] == ["prompt", "steps", "batchsize", "openai_n"]
    assert all(isinstance(e, GenerationRequestError) for e in errors)


def test_collect_errors_empty_for_valid_request(basic_request):
    assert collect_errors(basic_request) == []


def test_errors_are_value_errors():
    """검증 에러는 ValueError로도 처리 가능"""
    with pytest.raises(ValueError):
        validate_request(GenerationRequest())


def test_find_conflicts(basic_request):
    assert find_conflicts(basic_request) == []

    basic_request.ideogram.resolution = "1024x1024"
    basic_request.ideogram.aspect_ratio = "1:1"
    basic_request.ideogram.style_codes = ["0123ABCD"]
    basic_request.ideogram.style_type = "REALISTIC"

    assert find_conflicts(basic_request) == [
        ("ideogram_resolution", "ideogram_aspect_ratio"),
        ("ideogram_style_codes", "ideogram_style_type"),
    ]


def test_empty_style_codes_do_not_conflict(basic_request):
    basic_request.ideogram.style_codes = []
    basic_request.ideogram.style_type = "REALISTIC"

    assert find_conflicts(basic_request) == []


@pytest.mark.parametrize("value", ["3.5", "-2", ".5", "1e3", "4.", "0"])
def test_valid_flux_guidance_scales(value):
    validate_request(GenerationRequest(prompt="a red fox", flux_guidance_scale=value))


@pytest.mark.parametrize(
    "field, wire_key",
    [
        ("cfg_scale", "cfgscale"),
        ("sigma_shift", "sigmashift"),
        ("sampler_sigma_min", "samplersigmamin"),
        ("sampler_sigma_max", "samplersigmamax"),
        ("sampler_rho", "samplerrho"),
    ],
)
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_floats_are_rejected(field, wire_key, value):
    """NaN/Infinity는 JSON으로 보낼 수 없으므로 직렬화 전에 거부"""
    request = GenerationRequest(prompt="a red fox", **{field: value})

    with pytest.raises(OutOfRangeValueError) as exc_info:
        validate_request(request)

    assert exc_info.value.field == wire_key
    assert exc_info.value.constraint == "finite number"


def test_non_finite_lora_weight_is_rejected(basic_request):
    basic_request.add_lora("styleA", 0.8).add_lora("styleB", float("inf"))

    with pytest.raises(OutOfRangeValueError) as exc_info:
        to_wire(basic_request)

    assert exc_info.value.field == "loras[1].weight"


def test_init_image_not_decoded_by_default(basic_request, monkeypatch):
    monkeypatch.setattr("swarmui_client.validation.VALIDATE_INIT_IMAGE", False)
    basic_request.init_image = "not an image"

    assert to_wire(basic_request)["initimage"] == "not an image"


def test_invalid_init_image_rejected_when_checked(basic_request):
    basic_request.init_image = "not an image"

    with pytest.raises(OutOfRangeValueError) as exc_info:
        to_wire(basic_request, check_init_image=True)

    assert exc_info.value.field == "initimage"
    assert exc_info.value.value == "<12 chars>"
    assert "Base64 디코딩 실패" in exc_info.value.constraint


def test_valid_init_image_passes_when_checked(basic_request, sample_base64_image):
    basic_request.init_image = sample_base64_image

    payload = to_wire(basic_request, check_init_image=True)

    assert payload["initimage"] == sample_base64_image


def test_init_image_check_follows_config(basic_request, monkeypatch):
    monkeypatch.setattr("swarmui_client.validation.VALIDATE_INIT_IMAGE", True)
    basic_request.init_image = base64.b64encode(b"hello").decode()

    errors = collect_errors(basic_request)

    assert [e.field for e in errors] == ["initimage"]
    # 명시적 인자가 설정보다 우선
    assert collect_errors(basic_request, check_init_image=False) == []
