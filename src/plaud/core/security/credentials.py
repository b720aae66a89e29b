"""
Credential handling helpers.

Credentials and tokens pass through the client but must never reach logs
or error messages in clear text.
"""

from plaud.constants import MASKED_CREDENTIAL_VISIBLE_CHARS


class CredentialSanitizer:
    """Masking of credentials before they are logged."""

    @staticmethod
    def mask_credential(credential: str, visible_chars: int = MASKED_CREDENTIAL_VISIBLE_CHARS) -> str:
        """
        Mask credential for display/logging purposes.

        Args:
            credential: Credential to mask
            visible_chars: Number of characters to show at the end

        Returns:
            Masked credential string
        """
        if not credential:
            return "[empty]"

        if len(credential) <= visible_chars:
            return "*" * len(credential)

        return "*" * (len(credential) - visible_chars) + credential[-visible_chars:]
