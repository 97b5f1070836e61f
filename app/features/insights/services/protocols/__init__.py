"""Service protocols for the insights feature."""

from .insight_generator import GeneratedText, InsightGenerator

__all__ = ["GeneratedText", "InsightGenerator"]
