from ..core.exceptions import CoursePlannerException


class IndexException(CoursePlannerException):
    """Base class for ordered index errors."""
    pass


class DuplicateKeyError(IndexException):
    """Raised when a course number is already present in the index."""

    def __init__(self, course_number: str):
        self.course_number = course_number
        super().__init__(f"Course {course_number} is already in the index")
