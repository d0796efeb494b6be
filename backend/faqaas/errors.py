# faqaas/errors.py


class ConfigError(RuntimeError):
    """Configuration is missing or malformed; the process must not start."""


class StorageError(Exception):
    """A repository call failed (connection, query or constraint problem)."""


class AdminLoginRequired(Exception):
    """Raised by the admin guard when no valid session cookie is present."""
