"""
JsonRedactor - Core engine for masking sensitive values in JSON documents.

This engine orchestrates:
1. Parsing the input text into a mutable tree
2. A recursive walk that masks values selected by the options' rules
3. Serializing the tree back in the configured formatting mode
4. Falling back to the mask (or the untouched input) for invalid JSON

The document's shape never changes: object keys, key order, array lengths
and nesting are preserved; only values are replaced by the mask string.

Thread-safe: the engine holds nothing but its immutable options.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .jsontree import InvalidJsonError, parse_json, serialize_json
from .options import ContainerPolicy, Formatting, OnParseError, RedactorOptions
from .profiles import DEFAULT_PROFILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedactionResult:
    """Outcome of ``JsonRedactor.try_redact``."""
    success: bool
    redacted: Optional[str] = None  # Serialized document when success is True
    error: Optional[str] = None  # Parse error message when success is False


class JsonRedactor:
    """
    Engine for redacting values in JSON text.

    A property's value is redacted when any of the following holds:
    1. Its name is listed in ``redact_names``
    2. A conditional rule targets it and a sibling triggers that rule
    3. An enclosing property was redacted (under DESCEND_INTO_CONTAINER)

    Example:
        redactor = JsonRedactor(RedactorOptions(redact_names=["password"]))

        redactor.redact('{"user": "ann", "password": "hunter2"}')
        # '{"user":"ann","password":"[REDACTED]"}'

        redactor.redact("not json")
        # '[REDACTED]'

        result = redactor.try_redact("not json")
        # result.success: False
        # result.error: 'Expecting value: line 1 column 1 (char 0)'
    """

    def __init__(self, options: Optional[RedactorOptions] = None):
        """
        Initialize the JsonRedactor.

        Args:
            options: The redaction policy. Defaults to ``RedactorOptions()``,
                     which redacts nothing until names or rules are given.
        """
        self._options = options if options is not None else RedactorOptions()
        comparison = self._options.comparison

        self._mask = self._options.mask
        self._mask_containers = (
            self._options.container_policy == ContainerPolicy.MASK_WHOLE_CONTAINER
        )
        self._normalize = comparison.normalize
        self._redact_names = frozenset(comparison.normalize(n) for n in self._options.redact_names)

        # target name -> [(trigger name, trigger value), ...]
        self._conditions: dict[str, list[tuple[str, str]]] = {}
        for rule in self._options.conditional_rules:
            self._conditions.setdefault(comparison.normalize(rule.target_name), []).append(
                (comparison.normalize(rule.trigger_name), comparison.normalize(rule.trigger_value))
            )

        if self._options.formatting not in (
            Formatting.COMPRESSED, Formatting.INDENTED, Formatting.WHITE_SPACED
        ):
            raise ValueError(f"Invalid formatting: {self._options.formatting!r}")
        self._formatting = self._options.formatting

        logger.debug(
            f"JsonRedactor ready: {len(self._redact_names)} names, "
            f"{len(self._options.conditional_rules)} conditional rules, "
            f"container_policy={self._options.container_policy.value}"
        )

    @classmethod
    def from_profiles(cls, *profiles, **option_kwargs) -> "JsonRedactor":
        """
        Build an engine from profiles plus any extra ``RedactorOptions`` fields.

        Example:
            redactor = JsonRedactor.from_profiles(
                DEFAULT_PROFILE, formatting="indented"
            )
        """
        options = RedactorOptions(**option_kwargs)
        for profile in profiles:
            options = options.with_profile(profile)
        return cls(options)

    @property
    def options(self) -> RedactorOptions:
        return self._options

    def redact(self, text: Optional[str]) -> Optional[str]:
        """
        Redact a JSON document, falling back on invalid input.

        Args:
            text: The JSON text to redact.

        Returns:
            The redacted JSON text. For input that is not valid JSON, the
            bare mask (OnParseError.RETURN_MASK) or ``text`` itself, ``None``
            included (OnParseError.RETURN_INPUT_UNCHANGED).
        """
        result = self.try_redact(text)
        if result.success:
            return result.redacted
        return self._fallback(text)

    def try_redact(self, text: Optional[str]) -> RedactionResult:
        """
        Redact a JSON document, reporting parse failures instead of raising.

        Returns:
            A RedactionResult with the redacted text on success, or the
            parse error message on failure.
        """
        try:
            tree = parse_json(text)
        except InvalidJsonError as e:
            # Never log the input itself; it is the thing being protected
            logger.debug(f"Input is not valid JSON: {e}")
            return RedactionResult(success=False, error=str(e))

        tree = self.redact_tree(tree)
        return RedactionResult(success=True, redacted=serialize_json(tree, self._formatting))

    def redact_batch(self, texts: Iterable[Optional[str]]) -> tuple[list[Optional[str]], int]:
        """
        Redact multiple JSON documents.

        Args:
            texts: JSON texts to redact.

        Returns:
            A tuple of (redacted_texts, failed_count):
            - redacted_texts: Results of ``redact()`` in input order
            - failed_count: Number of texts that were not valid JSON
        """
        results = []
        failed_count = 0

        for text in texts:
            result = self.try_redact(text)
            if result.success:
                results.append(result.redacted)
            else:
                results.append(self._fallback(text))
                failed_count += 1

        return results, failed_count

    def _fallback(self, text: Optional[str]) -> Optional[str]:
        if self._options.on_parse_error == OnParseError.RETURN_INPUT_UNCHANGED:
            return text
        return self._mask

    def redact_tree(self, root: Any) -> Any:
        """
        Redact an already-parsed tree in place.

        Dicts and lists are mutated; the returned root is the same object
        unless nothing could be mutated (a bare scalar root is returned as-is).
        """
        return self._redact_node(root, False)

    def _redact_node(self, node: Any, redacting: bool) -> Any:
        """Return the value to store in place of ``node``."""
        if isinstance(node, dict):
            if redacting and self._mask_containers:
                return self._mask
            self._redact_object(node, redacting)
            return node

        if isinstance(node, list):
            if redacting and self._mask_containers:
                return self._mask
            for index, item in enumerate(node):
                node[index] = self._redact_node(item, redacting)
            return node

        # Scalar: str, int, float, bool or None. The mask is always a str.
        return self._mask if redacting else node

    def _redact_object(self, obj: dict, redacting: bool) -> None:
        # Decide every property from the untouched siblings before writing
        siblings = list(obj.items())
        decisions = [
            (name, value, redacting or self._should_redact(name, siblings))
            for name, value in siblings
        ]
        for name, value, redact_property in decisions:
            obj[name] = self._redact_node(value, redact_property)

    def _should_redact(self, name: str, siblings: list[tuple[str, Any]]) -> bool:
        key = self._normalize(name)
        if key in self._redact_names:
            return True

        conditions = self._conditions.get(key)
        if not conditions:
            return False
        for trigger_name, trigger_value in conditions:
            for sibling_name, sibling_value in siblings:
                if (
                    isinstance(sibling_value, str)
                    and self._normalize(sibling_name) == trigger_name
                    and self._normalize(sibling_value) == trigger_value
                ):
                    return True
        return False


# Singleton instance for convenience
_default_engine: Optional[JsonRedactor] = None


def get_default_engine() -> JsonRedactor:
    """
    Get the default JsonRedactor instance.

    Uses default options plus the US/Global profile. For more control,
    instantiate JsonRedactor directly.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = JsonRedactor.from_profiles(DEFAULT_PROFILE)
    return _default_engine
