from dataclasses import dataclass

from ..core.course import Course


@dataclass(frozen=True)
class CourseRow:
    """
    One parsed, not yet validated line of a course file.

    Produced by the first loader pass. Course number and prerequisites
    are already uppercased; the title is kept as written.
    """
    line_number: int
    line: str
    course_number: str
    title: str
    prerequisites: tuple[str, ...]

    def to_course(self) -> Course:
        return Course.create(self.course_number, self.title, self.prerequisites)
