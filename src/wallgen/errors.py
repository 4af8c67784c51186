class WallgenError(Exception):
    """Base class for errors surfaced to wallgen callers."""


class ConfigurationError(WallgenError):
    """Required configuration (e.g. the text-generation API key) is missing."""


class GenerationError(WallgenError):
    """The request failed as a whole; no partial result is returned."""
