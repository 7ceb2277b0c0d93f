"""Mood-filtered recommendation resolution."""

from moodwave.recommendations.service import RecommendationService

__all__ = ["RecommendationService"]
