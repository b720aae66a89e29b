from .credentials import CredentialSanitizer

__all__ = ["CredentialSanitizer"]
