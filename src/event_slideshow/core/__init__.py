"""
Event Slideshow Core Package

Shared data models, schema validation and serialization for the playlist
pipeline.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Submissions are a read-only snapshot of the store
   - Slides are built fresh on every composition call

2. **Normalise at the Boundary**
   - Stored documents are resolved to one width/height/image reference
     in ``core.utils.serialization``; the pipeline never inspects raw
     documents

3. **Fairness Lives Outside**
   - ``play_count`` is read here and incremented by an external writer
     from the ids the pipeline emits
"""

from .models import Submission, ShapeCategory, SlideKind, Slide

__all__ = [
    "Submission",
    "ShapeCategory",
    "SlideKind",
    "Slide",
]
