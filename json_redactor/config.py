"""
Environment configuration for the JSON redactor.

Reads JSON_REDACTOR_* variables (optionally from a .env file) into
RedactorOptions. Bad values raise ValueError immediately so a misconfigured
deployment fails at startup, not on its first document.
"""

import json
import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .options import DEFAULT_MASK, RedactorOptions
from .profiles import get_profile

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSON_REDACTOR_"


def _split_list(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_rules(raw: Optional[str]) -> list:
    if not raw:
        return []
    try:
        rules = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{ENV_PREFIX}CONDITIONAL_RULES is not valid JSON: {e}") from e
    if not isinstance(rules, list):
        raise ValueError(f"{ENV_PREFIX}CONDITIONAL_RULES must be a JSON array")
    return rules


def load_options_from_env(environ: Optional[Mapping[str, str]] = None) -> RedactorOptions:
    """
    Build RedactorOptions from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``. When omitted,
                 a ``.env`` file in the working directory is loaded first.

    Variables:
        JSON_REDACTOR_MASK: Mask text (default "[REDACTED]")
        JSON_REDACTOR_REDACT_NAMES: Comma-separated property names
        JSON_REDACTOR_CONDITIONAL_RULES: JSON array, e.g.
            [{"if": "type", "is": "check", "redact": "checkNumber"}]
        JSON_REDACTOR_CONTAINER_POLICY: mask_whole_container | descend_into_container
        JSON_REDACTOR_ON_PARSE_ERROR: return_mask | return_input_unchanged
        JSON_REDACTOR_COMPARISON: ordinal | ordinal_ignore_case
        JSON_REDACTOR_FORMATTING: compressed | indented | white_spaced
        JSON_REDACTOR_PROFILES: Comma-separated profile names, e.g. us_global

    Raises:
        ValueError: If any variable holds an invalid value.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    def get(name: str, default: Optional[str] = None) -> Optional[str]:
        return environ.get(ENV_PREFIX + name, default)

    kwargs = {
        "mask": get("MASK", DEFAULT_MASK),
        "redact_names": _split_list(get("REDACT_NAMES")),
        "conditional_rules": _parse_rules(get("CONDITIONAL_RULES")),
    }
    for field_name in ("container_policy", "on_parse_error", "comparison", "formatting"):
        value = get(field_name.upper())
        if value:
            kwargs[field_name] = value.strip().lower()

    options = RedactorOptions(**kwargs)
    for profile_name in _split_list(get("PROFILES")):
        options = options.with_profile(get_profile(profile_name))

    logger.info(
        f"Loaded redactor options from environment "
        f"(profiles: {', '.join(options.profiles) or 'none'})"
    )
    return options
