from dataclasses import dataclass
from typing import Iterable

from .course_row import CourseRow


@dataclass(frozen=True)
class PrerequisiteViolation:
    """A prerequisite reference that does not resolve to a loaded course."""
    course: str
    prerequisite: str
    line_number: int

    @property
    def message(self) -> str:
        return (f"Prerequisite {self.prerequisite} for course {self.course} "
                f"does not exist (line {self.line_number})")


class CourseValidator:
    """🔍 Validates referential integrity of a parsed course file.

    🔗 Verifies every prerequisite names a course from the same load
    📋 Keeps the violations of the last run for reporting
    """

    def __init__(self):
        """
        🎬 Initialize validator with an empty violation list.
        """
        self.violations: list[PrerequisiteViolation] = []

    def validate_prerequisites(self, rows: Iterable[CourseRow],
                               known_course_numbers: set[str]) -> bool:
        """
        🔍 Check every prerequisite of every row against the known course numbers.

        The known set must come from a complete first pass over the
        same rows, so forward references resolve.

        Args:
            rows: Parsed rows in input order
            known_course_numbers: Uppercased course numbers defined by the rows

        Returns:
            True if every prerequisite resolves, False otherwise
        """
        self.violations.clear()

        for row in rows:
            for prerequisite in row.prerequisites:
                if prerequisite not in known_course_numbers:
                    self.violations.append(PrerequisiteViolation(
                        course=row.course_number,
                        prerequisite=prerequisite,
                        line_number=row.line_number,
                    ))

        return len(self.violations) == 0

    def get_violations(self) -> list[PrerequisiteViolation]:
        """Get the violations from the last validation, in input order."""
        return self.violations.copy()

    def get_validation_errors(self) -> list[str]:
        """Get a list of validation messages from the last validation."""
        return [violation.message for violation in self.violations]
