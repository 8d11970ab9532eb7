"""
Decoding of irregular-word documents.

An irregular-word document is a flat mapping of singular -> plural words:

    {"octopus": "octopodes", "cactus": "cacti"}

JSON is the default format. YAML documents hold the same mapping:

    octopus: octopodes
    cactus: cacti
"""

import json
import logging
from pathlib import Path
from typing import IO, Union

import yaml

from .constants import YAML_SUFFIXES
from .errors import InflectionDecodeError

logger = logging.getLogger("inflections.loader")

FORMATS = ("json", "yaml")


def format_for_path(path: Union[str, Path]) -> str:
    """Pick the document format from a file suffix (YAML or else JSON)."""
    return "yaml" if Path(path).suffix.lower() in YAML_SUFFIXES else "json"


def decode_irregulars(source: Union[str, bytes, IO], fmt: str = "json") -> dict[str, str]:
    """
    Decode an irregular-word document into a singular -> plural mapping.

    Args:
        source: Readable stream, or the document itself as str/bytes
        fmt: "json" or "yaml"

    Returns:
        Mapping of singular words to plural words, in document order

    Raises:
        InflectionDecodeError: Document does not parse, or is not a flat
            mapping of strings to strings
        ValueError: Unknown format name
    """
    if fmt not in FORMATS:
        raise ValueError(f"unknown inflection document format: {fmt!r}")

    try:
        text = source if isinstance(source, (str, bytes)) else source.read()
        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        # JSONDecodeError and UnicodeDecodeError (from bytes or a text stream) are ValueErrors
        raise InflectionDecodeError(
            f"could not decode inflection document ({fmt}): {e}"
        ) from e

    if not isinstance(data, dict):
        raise InflectionDecodeError(
            f"could not decode inflection document ({fmt}): "
            f"expected a mapping, got {type(data).__name__}"
        )

    for singular, plural in data.items():
        if not isinstance(singular, str) or not isinstance(plural, str):
            raise InflectionDecodeError(
                f"could not decode inflection document ({fmt}): "
                f"entry {singular!r}: {plural!r} is not a pair of strings"
            )

    logger.debug(f"Decoded {len(data)} irregular word(s) from {fmt} document")
    return data
