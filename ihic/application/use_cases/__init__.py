"""Application use cases."""

from .generate_site import GenerateSite, GenerationResult

__all__ = ["GenerateSite", "GenerationResult"]
