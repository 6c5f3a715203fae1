"""Exceptions raised by competition_field."""


class CompetitionFieldError(Exception):
    """Base class for all competition_field errors."""


class InvalidObjectError(CompetitionFieldError, ValueError):
    """Object cannot be registered (empty type name, or it is the robot)."""


class ConfigError(CompetitionFieldError):
    """Malformed configuration or layout file."""
