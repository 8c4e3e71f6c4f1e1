"""Generation run exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest
from .generation_use_case import execute_visual_test_generation

__all__ = [
    "GenerationOutcome",
    "GenerationRequest",
    "execute_visual_test_generation",
]
