"""Exceptions raised by the seeder."""


class FixtureError(Exception):
    """A fixture file is missing or cannot be parsed."""


class ConfigError(Exception):
    """Backend configuration is invalid."""


class BackendAuthError(Exception):
    """Admin authentication against PocketBase failed."""


class RecordRejected(Exception):
    """A fixture record cannot be mapped to a backend record.

    Raised while building a record (bad identifier format, missing related
    record); the seeder reports the message and skips the record.
    """
