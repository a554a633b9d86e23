from dataclasses import dataclass, field
from typing import Iterable


def normalize_course_number(course_number: str) -> str:
    """
    Normalize a course number for storage and comparison.

    Course numbers are matched case-insensitively, so every stored
    number and every lookup key goes through this function.
    """
    return course_number.strip().upper()


@dataclass(frozen=True)
class Course:
    """
    A validated course catalog entry.

    📋 Holds the course number, its title and the ordered list of
    prerequisite course numbers. Instances are immutable once built;
    use ``Course.create`` to apply the normalization rules.
    """

    """🔑 Uppercased course number, e.g. CSCI101"""
    course_number: str

    """📖 Title exactly as given in the source (whitespace trimmed)"""
    title: str

    """🔗 Uppercased prerequisite course numbers, in source order"""
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, course_number: str, title: str,
               prerequisites: Iterable[str] = ()) -> 'Course':
        """
        Build a course, normalizing the course number and prerequisites.

        The title is trimmed but keeps its original case. Duplicate
        prerequisites are kept as given.
        """
        return cls(
            course_number=normalize_course_number(course_number),
            title=title.strip(),
            prerequisites=tuple(normalize_course_number(p) for p in prerequisites),
        )

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0

    def to_dict(self) -> dict:
        """
        📦 Convert the course to a dictionary for serialization.

        Returns:
            dict: Dictionary representation of the course
        """
        return {
            "course_number": self.course_number,
            "title": self.title,
            "prerequisites": list(self.prerequisites),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Course':
        """
        📥 Create a course from its dictionary representation.

        Args:
            data: Dictionary with course_number, title and optional prerequisites

        Returns:
            Course: New normalized course instance
        """
        return cls.create(
            data["course_number"],
            data["title"],
            data.get("prerequisites", ()),
        )

    def __str__(self) -> str:
        return f"{self.course_number}, {self.title}"
