"""Tests for capability validation."""
from __future__ import annotations

import pytest

from grok_client.builder import build_chat, build_image
from grok_client.catalog import MODELS
from grok_client.errors import InvalidModelError, UnsupportedCapabilityError
from grok_client.types.enums import Capability
from grok_client.validation import validate, validate_call


@pytest.mark.parametrize("info", MODELS, ids=lambda m: m.id)
@pytest.mark.parametrize("capability", list(Capability))
def test_validate_succeeds_iff_capability_in_modalities(info, capability) -> None:
    if capability in info.modalities:
        assert validate(info.id, capability) is info
    else:
        with pytest.raises(UnsupportedCapabilityError):
            validate(info.id, capability)


@pytest.mark.parametrize("capability", ["text", "image", "audio"])
def test_unknown_model_is_invalid(capability: str) -> None:
    with pytest.raises(InvalidModelError):
        validate("nonexistent-model", capability)


def test_unsupported_capability_carries_details() -> None:
    with pytest.raises(UnsupportedCapabilityError) as exc_info:
        validate("grok-3", Capability.IMAGE)
    assert exc_info.value.model == "grok-3"
    assert exc_info.value.capability == "image"


def test_unknown_capability_string_is_unsupported() -> None:
    with pytest.raises(UnsupportedCapabilityError):
        validate("grok-4", "audio")


def test_default_chat_call_passes() -> None:
    assert validate_call(build_chat("hello")).id == "grok-4"


def test_default_image_call_passes() -> None:
    assert validate_call(build_image()).id == "grok-2-image"


def test_text_only_model_rejected_for_image_call() -> None:
    with pytest.raises(UnsupportedCapabilityError):
        validate_call(build_image({"model": "grok-3-mini"}))
