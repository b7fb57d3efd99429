"""Pre-flight check that a model can serve a capability."""
from __future__ import annotations

from grok_client.catalog import ModelInfo, lookup
from grok_client.errors import UnsupportedCapabilityError
from grok_client.types.enums import Capability
from grok_client.types.request import Call


def validate(model: str, capability: Capability | str) -> ModelInfo:
    """Return the catalog entry for *model* if it supports *capability*.

    Raises :class:`InvalidModelError` for unknown models and
    :class:`UnsupportedCapabilityError` when *capability* is not one of the
    model's modalities.
    """
    info = lookup(model)
    if not info.supports(capability):
        raise UnsupportedCapabilityError(model, str(capability))
    return info


def validate_call(call: Call) -> ModelInfo:
    return validate(call.model, call.capability)
