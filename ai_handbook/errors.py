"""Exceptions raised by the handbook utilities."""


class HandbookError(Exception):
    """Base class for handbook errors."""


class SourceNotFoundError(HandbookError):
    """No handbook source directory could be resolved."""


class ManifestError(HandbookError):
    """The manifest file is missing, unparsable, or not a mapping."""


class UnknownVariantError(HandbookError):
    """The requested deployment variant is not defined."""


class VariantError(HandbookError):
    """The variant tables are missing, unparsable, or malformed."""
