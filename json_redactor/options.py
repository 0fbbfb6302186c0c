"""
Redactor Options - Immutable policy describing what to redact and how.

Options are plain data: the engine reads them once at construction and
never mutates them. Enum fields accept either the member or its string
value, so options can be built straight from config files or environment
variables:

    RedactorOptions(
        redact_names=["password", "ssn"],
        conditional_rules=[("type", "creditCard", "creditCardData")],
        container_policy="descend_into_container",
    )

Invalid values fail here, at construction, never during a redaction call.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Mapping, Union

logger = logging.getLogger(__name__)

DEFAULT_MASK = "[REDACTED]"


def _upper_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


class ContainerPolicy(str, Enum):
    """What happens when a redact-triggering property holds an object or array."""

    MASK_WHOLE_CONTAINER = "mask_whole_container"
    DESCEND_INTO_CONTAINER = "descend_into_container"


class OnParseError(str, Enum):
    """Fallback returned by ``JsonRedactor.redact`` when the input is not JSON."""

    RETURN_MASK = "return_mask"
    RETURN_INPUT_UNCHANGED = "return_input_unchanged"


class ComparisonMode(str, Enum):
    """How property names and trigger values are compared."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"

    def normalize(self, value: str) -> str:
        """Return the comparison key for ``value`` under this mode."""
        if self is ComparisonMode.ORDINAL_IGNORE_CASE:
            # Simple per-character mapping; "ß" stays "ß" rather than "SS"
            return "".join(_upper_char(c) for c in value)
        return value


class Formatting(str, Enum):
    """Serialization style of redacted output."""

    COMPRESSED = "compressed"
    INDENTED = "indented"
    WHITE_SPACED = "white_spaced"


@dataclass(frozen=True)
class ConditionalRule:
    """
    Redact ``target_name`` when a sibling ``trigger_name`` equals ``trigger_value``.

    Example:
        ConditionalRule("type", "check", "checkNumber")
        # {"type": "check", "checkNumber": "2468"}
        #   -> {"type": "check", "checkNumber": "[REDACTED]"}
    """
    trigger_name: str  # sibling property to inspect, e.g. "type"
    trigger_value: str  # string value that fires the rule, e.g. "check"
    target_name: str  # property to redact, e.g. "checkNumber"

    def __post_init__(self):
        for attr in ("trigger_name", "trigger_value", "target_name"):
            if not isinstance(getattr(self, attr), str):
                raise TypeError(f"ConditionalRule.{attr} must be a str")

    @classmethod
    def coerce(cls, rule: Any) -> "ConditionalRule":
        """
        Build a rule from a ``ConditionalRule``, a 3-tuple, or a mapping.

        Mappings use the keys ``if``, ``is`` and ``redact``, which is the
        shape accepted in JSON configuration.
        """
        if isinstance(rule, cls):
            return rule
        if isinstance(rule, Mapping):
            try:
                return cls(rule["if"], rule["is"], rule["redact"])
            except KeyError as e:
                raise ValueError(f"Conditional rule is missing key {e}") from None
        if isinstance(rule, (tuple, list)) and len(rule) == 3:
            return cls(*rule)
        raise ValueError(f"Invalid conditional rule: {rule!r}")


EnumInput = Union[Enum, str]


def _coerce_enum(enum_cls: type, value: EnumInput, attr: str) -> Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(
            f"Invalid {attr} {value!r}; expected one of: {allowed}"
        ) from None


@dataclass(frozen=True)
class RedactorOptions:
    """
    Immutable redaction policy consumed by ``JsonRedactor``.

    Attributes:
        mask: Text inserted in place of every redacted value.
        redact_names: Property names whose values are always redacted.
        conditional_rules: Ordered rules redacting a property based on a
                           sibling's string value.
        container_policy: Whether a redacted object/array is replaced whole
                          or only its descendant scalars are masked.
        on_parse_error: Fallback of ``redact()`` for input that is not JSON.
        comparison: Case sensitivity of every name and trigger comparison.
        formatting: Output style of redacted documents.
    """
    mask: str = DEFAULT_MASK
    redact_names: tuple[str, ...] = ()
    conditional_rules: tuple[ConditionalRule, ...] = ()
    container_policy: ContainerPolicy = ContainerPolicy.MASK_WHOLE_CONTAINER
    on_parse_error: OnParseError = OnParseError.RETURN_MASK
    comparison: ComparisonMode = ComparisonMode.ORDINAL_IGNORE_CASE
    formatting: Formatting = Formatting.COMPRESSED
    profiles: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if not isinstance(self.mask, str):
            raise TypeError(f"mask must be a str, got {type(self.mask).__name__}")

        # Frozen dataclass: normalize through object.__setattr__
        names = _as_tuple(self.redact_names, "redact_names")
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"redact_names entries must be str, got {name!r}")
        object.__setattr__(self, "redact_names", names)

        rules = tuple(
            ConditionalRule.coerce(rule)
            for rule in _as_tuple(self.conditional_rules, "conditional_rules")
        )
        object.__setattr__(self, "conditional_rules", rules)

        object.__setattr__(self, "container_policy", _coerce_enum(
            ContainerPolicy, self.container_policy, "container_policy"))
        object.__setattr__(self, "on_parse_error", _coerce_enum(
            OnParseError, self.on_parse_error, "on_parse_error"))
        object.__setattr__(self, "comparison", _coerce_enum(
            ComparisonMode, self.comparison, "comparison"))
        object.__setattr__(self, "formatting", _coerce_enum(
            Formatting, self.formatting, "formatting"))
        object.__setattr__(self, "profiles", _as_tuple(self.profiles, "profiles"))

    def with_profile(self, profile) -> "RedactorOptions":
        """
        Return new options with a profile's names and rules appended.

        Args:
            profile: A ``RedactionProfile`` instance.

        Note:
            Entries already present are not duplicated. Merging the same
            profile twice is a no-op.
        """
        if profile.name in self.profiles:
            return self

        names = list(self.redact_names)
        for name in profile.get_redact_names():
            if name not in names:
                names.append(name)

        rules = list(self.conditional_rules)
        for rule in profile.get_conditional_rules():
            rule = ConditionalRule.coerce(rule)
            if rule not in rules:
                rules.append(rule)

        logger.info(f"Merged redaction profile: {profile.name}")
        return replace(
            self,
            redact_names=tuple(names),
            conditional_rules=tuple(rules),
            profiles=self.profiles + (profile.name,),
        )


def _as_tuple(value: Any, attr: str) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str):
        # A bare string would otherwise be split into characters
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    raise TypeError(f"{attr} must be an iterable, got {type(value).__name__}")
