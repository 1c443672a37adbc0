from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import gradio as gr

from .config import load_settings
from .coordinates import collect_coordinates
from .io_utils import read_json_content, write_results_file
from .json_types import as_document_list
from .variants import collect_variants

logger = logging.getLogger(__name__)


def coordinate_rows(coordinates: List[Dict[str, float]]) -> List[List[float]]:
    return [[c['lat'], c['lng']] for c in coordinates]


def format_status(data: Any, variants: List[Any], coordinates: List[Any]) -> str:
    item_count = len(as_document_list(data))
    return (
        f"Successfully loaded. Items: {item_count} | "
        f"Schema variants: {len(variants)} | "
        f"Coordinates: {len(coordinates)}"
    )


def _load_failed(message: str):
    return [], [], [], message, gr.update(interactive=False)


def load_and_analyze_json(file_obj):
    """Read an uploaded JSON file and run both collectors over it.

    Returns (variants, coordinates, coordinate table rows, status, export
    button update). Input errors are reported in the status. The collectors
    run independently: coordinates are still returned when the document is
    too deeply nested to extract a schema.
    """
    if file_obj is None:
        return _load_failed("No file uploaded.")

    try:
        data = read_json_content(file_obj)
    except (ValueError, RecursionError) as e:
        # ValueError covers json.JSONDecodeError and bad UTF-8
        logger.warning("Could not parse uploaded JSON: %s", e)
        return _load_failed(f"Error parsing JSON: {str(e)}")
    except OSError as e:
        logger.warning("Could not read uploaded file: %s", e)
        return _load_failed(f"Error reading file: {str(e)}")

    coordinates = [pair.as_dict() for pair in collect_coordinates(data)]

    try:
        variants = collect_variants(data)
    except RecursionError:
        logger.error("Document nesting too deep to extract a schema")
        status = (
            "Error: document is nested too deeply to compute schema variants. "
            f"Coordinates: {len(coordinates)}"
        )
        return [], coordinates, coordinate_rows(coordinates), status, gr.update(interactive=False)

    status = format_status(data, variants, coordinates)
    logger.info(status)
    return (
        variants,
        coordinates,
        coordinate_rows(coordinates),
        status,
        gr.update(interactive=bool(variants)),
    )


def export_results_handler(variants, coordinates, file_name, export_dir: Optional[str] = None):
    if not variants:
        return None, "No data loaded."

    if export_dir is None:
        export_dir = load_settings().export_dir

    results = {'variants': variants, 'coordinates': coordinates or []}
    try:
        path = write_results_file(results, file_name, export_dir)
    except OSError as e:
        logger.exception("Export failed")
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! Saved to {path}"
