"""Folio data models.

This module exports all core entities used throughout the application:
- PortfolioConfig: One complete portfolio configuration
- ContentBundle: User-editable content bound into sections
- FeedbackEvent: One logged user interaction
- ThemeId, SectionId, AnimationId, TypographyId: Closed id enumerations
"""

from folio.models.content import DEFAULT_CONTENT, ContentBundle, default_content
from folio.models.portfolio import (
    DEFAULT_CONFIG,
    AnimationCategory,
    AnimationId,
    FeedbackEvent,
    PortfolioConfig,
    SectionId,
    ThemeId,
    TypographyId,
    default_config,
)

__all__ = [
    "AnimationCategory",
    "AnimationId",
    "ContentBundle",
    "DEFAULT_CONFIG",
    "DEFAULT_CONTENT",
    "FeedbackEvent",
    "PortfolioConfig",
    "SectionId",
    "ThemeId",
    "TypographyId",
    "default_config",
    "default_content",
]
