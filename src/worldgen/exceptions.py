"""Custom exceptions for world generation."""


class WorldgenError(Exception):
    """Base exception for world generation errors."""

    pass


class ConfigurationError(WorldgenError, ValueError):
    """Raised when generation options fail validation."""

    pass


class RegionOutOfBoundsError(WorldgenError, ValueError):
    """Raised when a region is inverted or extends past the map."""

    pass
