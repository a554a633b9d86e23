from .exceptions import CoursePlannerException, ConfigurationError
from .course import Course, normalize_course_number

__all__ = [
    "CoursePlannerException",
    "ConfigurationError",
    "Course",
    "normalize_course_number",
]
