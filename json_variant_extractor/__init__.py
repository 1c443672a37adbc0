"""Core logic for the JSON Variant and Coordinate Extractor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- infer and merge structural schemas of JSON values
- group input items into distinct schema variants
- find 'geo:lat,lng' coordinate strings anywhere in a document
"""
from .coordinates import collect_coordinates
from .variants import collect_variants

__all__ = ['collect_coordinates', 'collect_variants']
