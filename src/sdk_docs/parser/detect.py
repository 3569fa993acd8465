"""Decode raw OpenAPI spec text by file format."""

import json

import yaml

from sdk_docs.errors import InvalidSpecError

YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(filename: str) -> str:
    """Detect the format of a spec file from its name.

    Returns: 'yaml' or 'json'.
    """
    if filename.lower().endswith(YAML_SUFFIXES):
        return "yaml"
    return "json"


def decode_spec(raw: str, filename: str) -> dict:
    """Parse raw spec text into a document dict.

    Raises InvalidSpecError when the text cannot be decoded or does not
    hold a mapping at the top level.
    """
    fmt = detect_format(filename)

    try:
        if fmt == "yaml":
            doc = yaml.safe_load(raw)
        else:
            doc = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InvalidSpecError(filename, str(e)) from e

    if not isinstance(doc, dict):
        raise InvalidSpecError(filename, f"expected an object, got {type(doc).__name__}")
    return doc
