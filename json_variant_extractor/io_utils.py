from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file, a file path or raw bytes."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if isinstance(file_obj, (bytes, bytearray)):
        return json.loads(file_obj.decode('utf-8'))

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return json.loads(content)

    # Path objects also have .name (the basename), so check them first
    if isinstance(file_obj, (str, os.PathLike)):
        path = os.fspath(file_obj)
    else:
        path = file_obj.name
    logger.debug("Reading JSON from %s", path)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_results_file(results: Dict[str, Any], file_name: Optional[str], export_dir: str) -> str:
    """Write results as indented JSON into export_dir and return the file path."""
    if not file_name or not file_name.strip():
        file_name = "schema_variants"
    file_name = file_name.strip()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    os.makedirs(export_dir, exist_ok=True)
    path = os.path.join(export_dir, file_name)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(results, f, indent=2, ensure_ascii=False)
    logger.info("Wrote results to %s", path)
    return path
