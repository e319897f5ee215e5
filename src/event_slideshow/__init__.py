"""Top-level package for the event slideshow toolkit.

Provides subpackages:
- event_slideshow.core – Submission / Slide models, schemas, serialization
- event_slideshow.playlist – classification, fairness ordering and playlist composition
- event_slideshow.loading – reading submission documents from JSON / JSONL
- event_slideshow.images – image dimension probing
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import version as pkg_version, PackageNotFoundError
    try:
        return pkg_version("event_slideshow")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
