"""
Tests for images.probe

Test Coverage:
- probe_dimensions(): header size, EXIF rotation, missing / corrupt files
- resolve_image_path(): local vs remote references
"""

from pathlib import Path

import pytest
from PIL import Image

from event_slideshow.images import probe_dimensions, resolve_image_path, ImageNotFoundError


class TestProbeDimensions:

    def test_probe_when_png_then_size(self, sample_image):
        assert probe_dimensions(sample_image) == (90, 160)

    def test_probe_when_exif_rotated_then_swapped(self, tmp_path):
        """Portrait phone photos stored sideways report display dimensions."""
        # Arrange
        img = Image.new("RGB", (160, 90), color="gray")
        exif = Image.Exif()
        exif[0x0112] = 6  # Rotate 90 CW
        path = tmp_path / "phone.jpg"
        img.save(path, exif=exif)

        # Act & Assert
        assert probe_dimensions(path) == (90, 160)

    def test_probe_when_missing_then_raises(self, tmp_path):
        with pytest.raises(ImageNotFoundError, match="not found"):
            probe_dimensions(tmp_path / "nope.png")

    def test_probe_when_not_an_image_then_raises(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("not really a png")
        with pytest.raises(ImageNotFoundError, match="Cannot read image"):
            probe_dimensions(path)


class TestResolveImagePath:

    def test_resolve_when_relative_then_under_root(self, tmp_path):
        assert resolve_image_path("/uploads/a.jpg", tmp_path) == tmp_path / "uploads" / "a.jpg"

    def test_resolve_when_remote_then_none(self, tmp_path):
        assert resolve_image_path("https://cdn.example.com/a.jpg", tmp_path) is None
        assert resolve_image_path("s3://bucket/a.jpg", tmp_path) is None

    def test_resolve_when_no_root_then_none(self):
        assert resolve_image_path("uploads/a.jpg", None) is None
