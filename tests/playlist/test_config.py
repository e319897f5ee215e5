"""
Unit tests for PlaylistConfig.

Verified: 2026-10-16
"""

import pytest

from event_slideshow.core.models import ShapeCategory
from event_slideshow.playlist import PlaylistConfig, DEFAULT_CATEGORY_PRIORITY


class TestPlaylistConfig:
    """Tests for PlaylistConfig dataclass."""

    def test_init_when_defaults_then_documented_values(self):
        # Act
        config = PlaylistConfig()

        # Assert
        assert config.limit == 10
        assert config.group_size_for(ShapeCategory.PORTRAIT) == 3
        assert config.group_size_for(ShapeCategory.SQUARE) == 6
        assert config.group_size_for(ShapeCategory.LANDSCAPE) == 1
        assert config.category_priority == DEFAULT_CATEGORY_PRIORITY
        assert config.classifier_mode == "wide"
        assert config.exclude_ids == frozenset()

    def test_layout_for_when_categories_then_hint_or_none(self):
        config = PlaylistConfig()
        assert config.layout_for(ShapeCategory.PORTRAIT) == "3-up"
        assert config.layout_for(ShapeCategory.SQUARE) == "6-up"
        assert config.layout_for(ShapeCategory.LANDSCAPE) is None

    def test_group_size_for_when_unclassifiable_then_key_error(self):
        with pytest.raises(KeyError):
            PlaylistConfig().group_size_for(ShapeCategory.UNCLASSIFIABLE)

    def test_init_when_negative_limit_then_raises_error(self):
        with pytest.raises(ValueError, match="limit must be non-negative"):
            PlaylistConfig(limit=-1)

    def test_init_when_zero_group_size_then_raises_error(self):
        with pytest.raises(ValueError, match="square_group_size must be positive"):
            PlaylistConfig(square_group_size=0)

    def test_init_when_priority_missing_category_then_raises_error(self):
        with pytest.raises(ValueError, match="category_priority"):
            PlaylistConfig(category_priority=(ShapeCategory.LANDSCAPE, ShapeCategory.SQUARE))

    def test_init_when_priority_repeats_category_then_raises_error(self):
        with pytest.raises(ValueError, match="category_priority"):
            PlaylistConfig(category_priority=(
                ShapeCategory.LANDSCAPE,
                ShapeCategory.LANDSCAPE,
                ShapeCategory.PORTRAIT,
                ShapeCategory.SQUARE,
            ))

    def test_init_when_unknown_classifier_mode_then_raises_error(self):
        with pytest.raises(ValueError, match="classifier_mode"):
            PlaylistConfig(classifier_mode="fuzzy")

    def test_init_when_exclude_ids_list_then_frozenset(self):
        config = PlaylistConfig(exclude_ids=["a", "b", "a"])
        assert config.exclude_ids == frozenset({"a", "b"})
