"""
This module handles reading JSON/YAML documents to query.
"""
import json
import logging
from pathlib import Path
from typing import Any
import yaml

from pathget.core.errors import DocumentLoadError

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document(text: str, suffix: str = "") -> Any:
    """
    Parse document text. JSON for .json files, YAML for everything else
    (YAML also accepts plain JSON).
    """
    suffix = suffix.lower()
    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(f"Could not parse document: {exc}") from exc


def load_document(path: Path | str) -> Any:
    """Load a JSON or YAML document from disk."""
    path = Path(path)
    logging.info("Loading document from %s...", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"Could not read {path}: {exc}") from exc
    if path.suffix.lower() not in JSON_SUFFIXES | YAML_SUFFIXES:
        logging.warning("Unknown extension for %s; parsing as YAML.", path)
    return parse_document(text, path.suffix)
