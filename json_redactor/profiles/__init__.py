"""
Redaction Profiles Package

This package contains reusable redaction profiles.
Add new profiles here to extend the default rule sets.

Available profiles:
    - us_global: Default credential, SSN and payment field names

To add a new profile:
    1. Create a new file (e.g., payments_eu.py)
    2. Subclass RedactionProfile
    3. Implement get_redact_names() (and optionally get_conditional_rules())
    4. Register it in PROFILES so it can be selected by name from config

Example:
    # json_redactor/profiles/payments_eu.py
    from ..base_profile import RedactionProfile
    from ..options import ConditionalRule

    class EUPaymentsProfile(RedactionProfile):
        @property
        def name(self) -> str:
            return "payments_eu"

        @property
        def description(self) -> str:
            return "SEPA payment fields"

        def get_redact_names(self) -> list[str]:
            return ["iban", "bic"]

        def get_conditional_rules(self) -> list[ConditionalRule]:
            return [ConditionalRule("method", "sepa", "mandateId")]
"""

from ..base_profile import RedactionProfile
from .us_global import USGlobalProfile, DEFAULT_PROFILE

PROFILES: dict[str, RedactionProfile] = {
    DEFAULT_PROFILE.name: DEFAULT_PROFILE,
}


def get_profile(name: str) -> RedactionProfile:
    """
    Look up a registered profile by name.

    Raises:
        ValueError: If no profile with that name is registered.
    """
    try:
        return PROFILES[name]
    except KeyError:
        available = ", ".join(sorted(PROFILES))
        raise ValueError(
            f"Unknown redaction profile {name!r}; available: {available}"
        ) from None


__all__ = ["USGlobalProfile", "DEFAULT_PROFILE", "PROFILES", "get_profile"]
