"""
Tests for playlist.composer

Test Coverage:
- compose_playlist(): end-to-end scenarios, limit handling, determinism
- PlaylistComposer: round-robin interleaving, termination, leftovers
- extract_submission_ids(): flattening order
"""

import pytest

from event_slideshow.core.models import ShapeCategory, SlideKind
from event_slideshow.playlist import (
    PlaylistComposer,
    PlaylistConfig,
    classify_aspect,
    compose_playlist,
    extract_submission_ids,
    order_buckets,
    partition_submissions,
)


LANDSCAPE = (1920, 1080)
SQUARE = (1080, 1080)
PORTRAIT = (1080, 1920)


def _kinds(slides):
    return [(s.kind.value, s.category.value, s.member_count) for s in slides]


class TestComposeScenarios:
    """Reference scenarios for the slideshow rotation."""

    def test_compose_when_five_landscape_limit_three_then_lowest_counters(self, make_submission):
        # Arrange
        pool = [make_submission(f"l{n}", LANDSCAPE, play_count=n) for n in (4, 2, 0, 3, 1)]

        # Act
        slides = compose_playlist(pool, limit=3)

        # Assert
        assert _kinds(slides) == [("single", "landscape", 1)] * 3
        assert extract_submission_ids(slides) == ["l0", "l1", "l2"]

    def test_compose_when_two_portraits_only_then_empty(self, make_submission):
        pool = [make_submission(f"p{i}", PORTRAIT) for i in range(2)]
        assert compose_playlist(pool, limit=5) == ()

    def test_compose_when_six_squares_and_one_landscape_then_single_then_mosaic(self, make_submission):
        # Arrange
        pool = [make_submission(f"s{i}", SQUARE) for i in range(6)]
        pool.append(make_submission("l0", LANDSCAPE))

        # Act
        slides = compose_playlist(pool, limit=2)

        # Assert
        assert _kinds(slides) == [("single", "landscape", 1), ("mosaic", "square", 6)]
        assert slides[1].layout == "6-up"
        assert len(extract_submission_ids(slides)) == 7

    def test_compose_when_width_zero_height_missing_then_landscape_single(self, make_submission):
        # Arrange
        pool = [make_submission("legacy", size=(0, None))]

        # Act
        slides = compose_playlist(pool, limit=1)

        # Assert
        assert slides[0].category is ShapeCategory.LANDSCAPE
        assert slides[0].to_dict()["submissions"][0]["width"] == 1920


class TestComposeLimits:

    @pytest.mark.parametrize("limit", [0, -3])
    def test_compose_when_limit_not_positive_then_empty(self, make_submission, limit):
        pool = [make_submission("l0")]
        assert compose_playlist(pool, limit=limit) == ()

    def test_compose_when_limit_omitted_then_default_ten(self, make_submission):
        pool = [make_submission(f"l{i:02d}", play_count=i) for i in range(15)]
        assert len(compose_playlist(pool)) == 10

    def test_compose_when_empty_pool_then_empty(self):
        assert compose_playlist([], limit=10) == ()

    def test_compose_when_limit_hit_mid_round_then_stops(self, make_submission):
        """The limit is checked before every emission, not once per round."""
        # Arrange
        pool = [make_submission("l0", LANDSCAPE)]
        pool += [make_submission(f"p{i}", PORTRAIT) for i in range(3)]
        pool += [make_submission(f"s{i}", SQUARE) for i in range(6)]

        # Act
        slides = compose_playlist(pool, limit=2)

        # Assert
        assert _kinds(slides) == [("single", "landscape", 1), ("mosaic", "portrait", 3)]


class TestPlaylistComposer:

    def _composer(self, pool, **config_kwargs):
        config = PlaylistConfig(**config_kwargs)
        buckets = order_buckets(partition_submissions(pool))
        return PlaylistComposer(buckets, config)

    def test_run_when_all_shapes_then_interleaved_per_round(self, make_submission):
        # Arrange
        pool = [make_submission(f"l{i}", LANDSCAPE, age=i) for i in range(3)]
        pool += [make_submission(f"p{i}", PORTRAIT, age=i) for i in range(6)]
        pool += [make_submission(f"s{i}", SQUARE, age=i) for i in range(6)]
        composer = self._composer(pool, limit=10)

        # Act
        slides = composer.run()

        # Assert
        assert _kinds(slides) == [
            ("single", "landscape", 1),
            ("mosaic", "portrait", 3),
            ("mosaic", "square", 6),
            ("single", "landscape", 1),
            ("mosaic", "portrait", 3),
            ("single", "landscape", 1),
        ]
        assert composer.rounds == 4  # the last round emits nothing
        assert composer.leftovers() == {
            ShapeCategory.LANDSCAPE: 0,
            ShapeCategory.PORTRAIT: 0,
            ShapeCategory.SQUARE: 0,
        }

    def test_run_when_remainder_then_left_for_next_call(self, make_submission):
        # Arrange
        pool = [make_submission(f"p{i}", PORTRAIT) for i in range(5)]
        composer = self._composer(pool)

        # Act
        slides = composer.run()

        # Assert
        assert len(slides) == 1
        assert composer.leftovers()[ShapeCategory.PORTRAIT] == 2

    def test_run_when_custom_priority_then_order_follows(self, make_submission):
        # Arrange
        pool = [make_submission("l0", LANDSCAPE)]
        pool += [make_submission(f"s{i}", SQUARE) for i in range(6)]
        composer = self._composer(
            pool,
            category_priority=(ShapeCategory.SQUARE, ShapeCategory.PORTRAIT, ShapeCategory.LANDSCAPE),
        )

        # Act
        slides = composer.run()

        # Assert
        assert [s.category for s in slides] == [ShapeCategory.SQUARE, ShapeCategory.LANDSCAPE]

    def test_run_when_custom_group_size_then_layout_follows(self, make_submission):
        pool = [make_submission(f"s{i}", SQUARE) for i in range(4)]
        slides = self._composer(pool, square_group_size=2).run()
        assert [s.layout for s in slides] == ["2-up", "2-up"]

    def test_run_when_any_pool_then_no_duplicate_placement(self, make_submission):
        # Arrange
        pool = [make_submission(f"l{i}", LANDSCAPE, play_count=i % 3) for i in range(7)]
        pool += [make_submission(f"p{i}", PORTRAIT, play_count=i % 2) for i in range(10)]
        pool += [make_submission(f"s{i}", SQUARE) for i in range(13)]

        # Act
        ids = extract_submission_ids(self._composer(pool, limit=50).run())

        # Assert
        assert len(ids) == len(set(ids))

    def test_run_when_mixed_pool_then_members_match_slide_category(self, make_submission):
        # Arrange
        pool = [make_submission(f"p{i}", PORTRAIT) for i in range(6)]
        pool += [make_submission(f"s{i}", (900 + i * 20, 1000)) for i in range(6)]
        pool += [make_submission(f"l{i}", (2000, 900 + i * 50)) for i in range(2)]

        # Act
        slides = self._composer(pool, limit=50).run()

        # Assert
        assert any(s.is_mosaic for s in slides)
        for slide in slides:
            assert {classify_aspect(*sub.display_size) for sub in slide.submissions} == {slide.category}


class TestDeterminism:

    def test_compose_when_run_twice_then_identical(self, make_submission):
        # Arrange
        pool = [make_submission(f"l{i}", LANDSCAPE, play_count=i % 2, age=i) for i in range(5)]
        pool += [make_submission(f"p{i}", PORTRAIT, play_count=1, age=-i) for i in range(7)]

        # Act
        first = compose_playlist(pool, limit=6)
        second = compose_playlist(pool, limit=6)

        # Assert
        assert first == second


class TestExtractSubmissionIds:

    def test_extract_when_mixed_slides_then_display_order(self, make_submission):
        # Arrange
        pool = [make_submission("l0", LANDSCAPE), make_submission("l1", LANDSCAPE)]
        pool += [make_submission(f"p{i}", PORTRAIT, age=i) for i in range(3)]

        # Act
        slides = compose_playlist(pool, limit=10)
        ids = extract_submission_ids(slides)

        # Assert
        assert ids == ["l0", "p0", "p1", "p2", "l1"]
        assert len(ids) == sum(s.member_count for s in slides)

    def test_extract_when_empty_then_empty_list(self):
        assert extract_submission_ids(()) == []
