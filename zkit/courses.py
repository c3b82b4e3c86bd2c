"""A student with a list of enrolled courses."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

ENROLLED = 200
DROPPED = 67


@dataclass
class CourseStudent:
    """A named student and the courses they take, in enrolment order."""

    name: str = ""
    courses: list[str] = field(default_factory=list)

    def enroll(self, course: str) -> None:
        """Add ``course`` at the end of the course list."""
        self.courses.append(course)

    def drop(self, course: str) -> bool:
        """Remove the first occurrence of ``course``; return whether one was found."""
        try:
            self.courses.remove(course)
        except ValueError:
            return False
        return True

    def describe(self) -> str:
        """Return the student's name followed by one line per course."""
        lines = [f"Student: {self.name}"]
        lines.extend(f"  Course: {course}" for course in self.courses)
        return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Enrol a sample student in many courses, drop some, and print the rest."""
    students: list[CourseStudent] = []
    student = CourseStudent("Alice")
    for number in range(ENROLLED):
        student.enroll(f"Course{number}")
    for number in range(DROPPED):
        student.drop(f"Course{number}")
    sys.stdout.write(student.describe())
    students.append(student)
    return 0