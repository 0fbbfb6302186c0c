"""
US/Global Redaction Profile - Default field rules.

This profile covers property names that commonly carry secrets in JSON
payloads, plus US payment fields (PCI-DSS).

Fields covered:
    - Passwords and password history
    - US Social Security Numbers
    - API keys, access/refresh tokens, client secrets
    - Private keys
    - Payment data gated on the payment type (check, credit card)
"""

from ..base_profile import RedactionProfile
from ..options import ConditionalRule


class USGlobalProfile(RedactionProfile):
    """
    Default redaction profile for US and globally common field names.

    Conditional rules handle payment records where the sensitive property
    only holds secrets for some payment types, e.g.:
        {"type": "check", "checkNumber": "2468"}
        {"type": "creditCard", "creditCardData": {...}}
    """

    @property
    def name(self) -> str:
        return "us_global"

    @property
    def description(self) -> str:
        return "US and global field names (credentials, SSN, payment data)"

    def get_redact_names(self) -> list[str]:
        return [
            # Credentials
            "password",
            "passwd",
            "passwordHistory",
            "secret",
            "clientSecret",
            "apiKey",
            "api_key",
            "accessToken",
            "access_token",
            "refreshToken",
            "refresh_token",
            "authorization",
            "privateKey",
            "private_key",

            # US PII
            "socialSecurityNumber",
            "ssn",
        ]

    def get_conditional_rules(self) -> list[ConditionalRule]:
        return [
            ConditionalRule("type", "check", "checkNumber"),
            ConditionalRule("type", "creditCard", "creditCardData"),
        ]


# Export the default profile
DEFAULT_PROFILE = USGlobalProfile()
