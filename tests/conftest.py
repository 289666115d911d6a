"""Shared fixtures for chat_rgb tests."""

import pytest

from chat_rgb.codec.pipeline import ColorPipeline, default_pipeline
from chat_rgb.core import palette
from chat_rgb.core.color import Color


@pytest.fixture
def pipeline() -> ColorPipeline:
    """The default pipeline (RGB enabled)."""
    return default_pipeline()


@pytest.fixture
def legacy_pipeline() -> ColorPipeline:
    """The default pipeline for clients without RGB support."""
    return default_pipeline().with_rgb_support(False)


@pytest.fixture
def red() -> Color:
    return Color.from_palette(palette.RED)


@pytest.fixture
def white() -> Color:
    return Color.from_palette(palette.WHITE)
