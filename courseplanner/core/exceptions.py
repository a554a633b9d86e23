"""Custom exceptions for the course planner."""


class CoursePlannerException(Exception):
    """Base exception for course planner errors."""
    pass


class ConfigurationError(CoursePlannerException):
    """Raised when a configuration value cannot be used."""
    pass
