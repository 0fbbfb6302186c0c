"""
Base Redaction Profile - Abstract base class for reusable field rules.

Extend this class to bundle the property names and conditional rules a
given kind of document needs. For example:
    - payments.py for billing payloads (card data, check numbers)
    - hipaa.py for healthcare records (patient identifiers)
    - auth.py for identity-provider events (tokens, secrets)

Each profile defines:
    - name: Unique identifier for the profile
    - description: Human-readable description
    - get_redact_names(): Property names always redacted
    - get_conditional_rules(): Optional sibling-conditioned rules

Profiles are merged into ``RedactorOptions`` with ``with_profile()`` before
the engine is built; the engine itself only ever sees plain options.
"""

from abc import ABC, abstractmethod

from .options import ConditionalRule


class RedactionProfile(ABC):
    """
    Abstract base class for redaction profiles.

    Example:
        class HealthProfile(RedactionProfile):
            @property
            def name(self) -> str:
                return "health"

            @property
            def description(self) -> str:
                return "Patient identifiers"

            def get_redact_names(self) -> list[str]:
                return ["patientId", "mrn", "dateOfBirth"]

            def get_conditional_rules(self) -> list[ConditionalRule]:
                return [ConditionalRule("kind", "diagnosis", "notes")]
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this profile (e.g., 'us_global')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this profile covers."""
        pass

    @abstractmethod
    def get_redact_names(self) -> list[str]:
        """Return the property names whose values are always redacted."""
        pass

    def get_conditional_rules(self) -> list[ConditionalRule]:
        """
        Optional: Return sibling-conditioned rules for this profile.

        By default, returns an empty list.
        """
        return []

    def __repr__(self) -> str:
        return f"<RedactionProfile: {self.name}>"
