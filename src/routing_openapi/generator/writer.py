"""Serialize generated OpenAPI documents to JSON or YAML."""

import json
from pathlib import Path
from typing import Any

import yaml


def detect_output_format(file_path: Path) -> str:
    """Pick the output format from the file suffix.

    Returns: 'json' or 'yaml'.
    """
    if file_path.suffix.lower() == ".json":
        return "json"
    return "yaml"


def dump_spec(spec: dict[str, Any], fmt: str) -> str:
    """Render an OpenAPI document as JSON or YAML text."""
    if fmt == "json":
        return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(spec, sort_keys=False, allow_unicode=True, default_flow_style=False)
