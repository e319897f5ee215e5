import pytest
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import event_slideshow
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from event_slideshow.core.models import Submission


BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

# Representative sizes per shape
LANDSCAPE = (1920, 1080)
SQUARE = (1080, 1080)
PORTRAIT = (1080, 1920)


# Common test fixtures
@pytest.fixture
def make_submission():
    """
    Factory for submissions.

    created_at defaults to BASE_TIME + `age` minutes so tests can order
    ties explicitly.
    """
    def _make(
        sub_id: str,
        size=LANDSCAPE,
        play_count: int = 0,
        age: int = 0,
        image_url: str | None = None,
    ) -> Submission:
        width, height = size if size is not None else (None, None)
        return Submission(
            id=sub_id,
            image_url=image_url or f"https://cdn.example.com/{sub_id}.jpg",
            created_at=BASE_TIME + timedelta(minutes=age),
            width=width,
            height=height,
            play_count=play_count,
        )
    return _make


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple portrait test image."""
    img = Image.new("RGB", (90, 160), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
