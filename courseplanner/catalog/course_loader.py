"""
Course loading from comma-separated text files.

Each non-blank line holds one course:
    course_number, title[, prerequisite, prerequisite, ...]

Loading runs in two passes so forward references resolve: the first pass
parses every line and collects the course numbers, the second checks
each prerequisite against that set. Nothing is returned unless the whole
file is valid.
"""
import logging
import os
from pathlib import Path
from typing import Iterable, Union

from ..core.course import Course, normalize_course_number
from .course_row import CourseRow
from .course_validator import CourseValidator
from .exceptions import (
    DuplicateCourseError,
    MalformedRecordError,
    SourceUnavailableError,
    UnknownPrerequisiteError,
)


class CourseLoader:
    """Loads and validates course records from delimited text."""

    FIELD_SEPARATOR = ","
    MIN_FIELDS = 2

    def __init__(self, validator: CourseValidator = None):
        """
        Initialize course loader.

        Args:
            validator: Prerequisite validator used for the second pass
        """
        self.validator = validator or CourseValidator()
        self.logger = logging.getLogger(__name__)

    def load_file(self, course_file: Union[str, os.PathLike]) -> list[Course]:
        """Load and validate every course in a file."""
        course_path = Path(course_file)
        self.logger.info("Loading courses from %s", course_path)

        try:
            with open(course_path, 'r', encoding='utf-8-sig') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Cannot read course file %s: %s", course_path, e)
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise SourceUnavailableError(str(course_file), reason) from e

        return self.load_lines(lines)

    def load_lines(self, lines: Iterable[str]) -> list[Course]:
        """
        Load and validate courses from already-read lines.

        Args:
            lines: Text lines, one course per line

        Returns:
            Courses in input order

        Raises:
            MalformedRecordError: If a line has fewer than two fields or an empty field
            DuplicateCourseError: If a course number appears twice
            UnknownPrerequisiteError: If a prerequisite names no loaded course
        """
        try:
            rows = self.parse_lines(lines)
            known_course_numbers = {row.course_number for row in rows}

            if not self.validator.validate_prerequisites(rows, known_course_numbers):
                first = self.validator.get_violations()[0]
                raise UnknownPrerequisiteError(first.course, first.prerequisite)
        except (MalformedRecordError, DuplicateCourseError,
                UnknownPrerequisiteError) as e:
            self.logger.warning("Course load rejected: %s", e)
            raise

        courses = [row.to_course() for row in rows]
        self.logger.info("Loaded %d courses", len(courses))
        return courses

    def parse_lines(self, lines: Iterable[str]) -> list[CourseRow]:
        """First pass: parse every non-blank line and reject duplicate course numbers."""
        rows: list[CourseRow] = []
        seen: set[str] = set()

        for line_number, raw_line in enumerate(lines, 1):
            line = raw_line.strip()
            if not line:
                continue

            row = self.parse_line(line, line_number)
            if row.course_number in seen:
                raise DuplicateCourseError(row.course_number, line_number)

            seen.add(row.course_number)
            rows.append(row)

        return rows

    def parse_line(self, line: str, line_number: int = 1) -> CourseRow:
        """Parse: course_number, title, prerequisite, prerequisite, ..."""
        fields = [piece.strip() for piece in line.split(self.FIELD_SEPARATOR)]

        # A trailing separator does not start a new field
        while fields and not fields[-1]:
            fields.pop()

        if len(fields) < self.MIN_FIELDS:
            raise MalformedRecordError(
                line_number, line,
                "expected at least a course number and a title")

        if not all(fields):
            raise MalformedRecordError(line_number, line, "empty field")

        return CourseRow(
            line_number=line_number,
            line=line,
            course_number=normalize_course_number(fields[0]),
            title=fields[1],
            prerequisites=tuple(normalize_course_number(p) for p in fields[2:]),
        )


def load_courses(source: Union[str, os.PathLike, Iterable[str]]) -> list[Course]:
    """
    Load courses from a file path or from an iterable of lines.

    Strings and path objects are treated as file names.
    """
    loader = CourseLoader()
    if isinstance(source, (str, os.PathLike)):
        return loader.load_file(source)
    return loader.load_lines(source)
