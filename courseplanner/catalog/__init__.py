from .exceptions import (
    LoadError,
    SourceUnavailableError,
    MalformedRecordError,
    UnknownPrerequisiteError,
    DuplicateCourseError,
    CatalogNotLoadedError,
)
from .course_row import CourseRow
from .course_validator import CourseValidator, PrerequisiteViolation
from .course_loader import CourseLoader, load_courses
from .course_catalog import CourseCatalog

__all__ = [
    "LoadError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "UnknownPrerequisiteError",
    "DuplicateCourseError",
    "CatalogNotLoadedError",
    "CourseRow",
    "CourseValidator",
    "PrerequisiteViolation",
    "CourseLoader",
    "load_courses",
    "CourseCatalog",
]
