from typing import Optional

from ..core.exceptions import CoursePlannerException


class LoadError(CoursePlannerException):
    """Base exception for failures while loading a course catalog."""
    pass


class SourceUnavailableError(LoadError):
    """Raised when the catalog source cannot be opened or read."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Unable to open course file '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedRecordError(LoadError):
    """Raised when a line does not hold at least a course number and a title."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: '{line}'")


class UnknownPrerequisiteError(LoadError):
    """Raised when a prerequisite does not name any course in the same load."""

    def __init__(self, course: str, prerequisite: str):
        self.course = course
        self.prerequisite = prerequisite
        super().__init__(
            f"Prerequisite {prerequisite} for course {course} does not exist")


class DuplicateCourseError(LoadError):
    """Raised when the same course number is defined more than once."""

    def __init__(self, course_number: str, line_number: Optional[int] = None):
        self.course_number = course_number
        self.line_number = line_number
        message = f"Course {course_number} is defined more than once"
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class CatalogNotLoadedError(CoursePlannerException):
    """Raised when the catalog is queried before any successful load."""

    def __init__(self):
        super().__init__("Please load data first")
