"""
JSON tree helpers - parse text into a mutable tree and serialize it back.

Trees are plain Python values as produced by ``json.loads``: ``dict``
(insertion order preserved), ``list``, ``str``, ``int``/``float``, ``bool``
and ``None``. The redaction engine mutates dicts and lists in place.
"""

import json
import math
import os
import re
from typing import Any, Optional

from .options import Formatting

_WHITESPACE_RUN = re.compile(r"\s+")


class InvalidJsonError(ValueError):
    """Raised when input text is not a valid JSON document."""


def _reject_constant(name: str):
    raise InvalidJsonError(f"Non-standard JSON constant: {name}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise InvalidJsonError(f"Number out of range: {literal}")
    return value


def parse_json(text: Optional[str]) -> Any:
    """
    Parse a JSON document.

    Args:
        text: The JSON text. ``None``, empty and whitespace-only input are
              not valid JSON.

    Returns:
        The parsed tree.

    Raises:
        InvalidJsonError: If the text cannot be parsed.
    """
    if text is None:
        raise InvalidJsonError("Input is None")
    if not isinstance(text, str):
        raise InvalidJsonError(f"Expected str, got {type(text).__name__}")

    try:
        return json.loads(
            text, parse_float=_parse_float, parse_constant=_reject_constant
        )
    except json.JSONDecodeError as e:
        raise InvalidJsonError(str(e)) from e


def serialize_json(tree: Any, formatting: Formatting = Formatting.COMPRESSED) -> str:
    """
    Serialize a tree using one of the ``Formatting`` modes.

    - COMPRESSED: ``{"a":1,"b":[1,2]}``
    - INDENTED: two spaces per level, platform line breaks
    - WHITE_SPACED: INDENTED with every whitespace run collapsed to one space
    """
    if formatting == Formatting.COMPRESSED:
        return json.dumps(tree, ensure_ascii=False, allow_nan=False, separators=(",", ":"))

    indented = json.dumps(
        tree, ensure_ascii=False, allow_nan=False, indent=2, separators=(",", ": ")
    )
    if formatting == Formatting.INDENTED:
        # Raw newlines only occur between tokens; strings escape theirs
        return indented.replace("\n", os.linesep)
    if formatting == Formatting.WHITE_SPACED:
        return _WHITESPACE_RUN.sub(" ", indented)

    raise ValueError(f"Invalid formatting: {formatting!r}")
