"""Grok client: request building, capability checks and cost estimates for the xAI API."""
from __future__ import annotations

__version__ = "0.1.0"

# Errors
from grok_client.errors import (
    GrokError,
    ConfigurationError,
    InvalidOptionsError,
    InvalidModelError,
    UnsupportedCapabilityError,
    TransportError,
    NetworkError,
    RequestTimeoutError,
    HttpStatusError,
    InvalidRequestError,
    AuthenticationError,
    AccessDeniedError,
    NotFoundError,
    ContextLengthError,
    RateLimitError,
    ServerError,
)

# Types
from grok_client.types import (
    AnalyzeOptions,
    Call,
    CallResult,
    Capability,
    ChatOptions,
    ChatPayload,
    ContentPart,
    ImageOptions,
    ImagePayload,
    Message,
    Role,
    SystemPlacement,
    Usage,
)

# Catalog
from grok_client.catalog import ModelInfo, Pricing, RateLimits, get_model_info, list_models, lookup

# Core
from grok_client.builder import build_analyze, build_chat, build_image, build_prompt
from grok_client.validation import validate
from grok_client.extract import extract_text
from grok_client.costs import estimate_cost
from grok_client.config import ClientConfig
from grok_client.middleware import CostTracker, cost_tracking_middleware, logging_middleware
from grok_client.client import GrokClient

__all__ = [
    "__version__",
    # Errors
    "GrokError",
    "ConfigurationError",
    "InvalidOptionsError",
    "InvalidModelError",
    "UnsupportedCapabilityError",
    "TransportError",
    "NetworkError",
    "RequestTimeoutError",
    "HttpStatusError",
    "InvalidRequestError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "ContextLengthError",
    "RateLimitError",
    "ServerError",
    # Types
    "AnalyzeOptions",
    "Call",
    "CallResult",
    "Capability",
    "ChatOptions",
    "ChatPayload",
    "ContentPart",
    "ImageOptions",
    "ImagePayload",
    "Message",
    "Role",
    "SystemPlacement",
    "Usage",
    # Catalog
    "ModelInfo",
    "Pricing",
    "RateLimits",
    "get_model_info",
    "list_models",
    "lookup",
    # Core
    "build_analyze",
    "build_chat",
    "build_image",
    "build_prompt",
    "validate",
    "extract_text",
    "estimate_cost",
    "ClientConfig",
    "CostTracker",
    "cost_tracking_middleware",
    "logging_middleware",
    "GrokClient",
]
