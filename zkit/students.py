"""A small student record system: a registry with an interactive menu and a
reader for whitespace-separated grade records."""

from __future__ import annotations

import re
import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

MAX_NAME_LENGTH = 50
"""Size of a name field, including its terminator."""

MAX_GPA = 4.0

_INT = re.compile(r"\s*([+-]?\d+)")
_DATE = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")

MENU = (
    "\nUniversity Student System\n"
    "1. Add Student\n"
    "2. Search Student\n"
    "3. Update Student\n"
    "4. Delete Student\n"
    "5. List Students by Year\n"
    "6. Exit\n"
    "Enter option: "
)


@dataclass
class Date:
    """A calendar date as entered, without range checks."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass
class Student:
    """A student with identifier, name, course and birthdate."""

    id: int
    name: str
    course: str
    birthdate: Date


def parse_date(text: str) -> Date:
    """Parse a ``dd/mm/yyyy`` date; raise ValueError if it does not match."""
    match = _DATE.match(text)
    if match is None:
        raise ValueError(f"invalid date: {text!r}")
    day, month, year = (int(group) for group in match.groups())
    return Date(day, month, year)


def _scan_int(text: str) -> Optional[int]:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _field(text: str) -> str:
    """Strip the line ending and clip to the width of a name field."""
    return text.split("\n", 1)[0][:MAX_NAME_LENGTH - 1]


class StudentRegistry:
    """An ordered collection of students."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def add(self, student: Student) -> None:
        """Put ``student`` at the front."""
        self._students.insert(0, student)

    def insert_sorted(self, student: Student) -> None:
        """Insert ``student`` before the first student whose id is not smaller."""
        position = next(
            (index for index, current in enumerate(self._students) if current.id >= student.id),
            len(self._students),
        )
        self._students.insert(position, student)

    def find(self, student_id: int) -> Student:
        """Return the first student with ``student_id``; raise KeyError if none."""
        for student in self._students:
            if student.id == student_id:
                return student
        raise KeyError(student_id)

    def update(self, student_id: int, name: str, course: str,
               birthdate: Optional[Date] = None) -> Student:
        """Replace name and course, and the birthdate when one is given."""
        student = self.find(student_id)
        student.name = name[:MAX_NAME_LENGTH - 1]
        student.course = course[:MAX_NAME_LENGTH - 1]
        if birthdate is not None:
            student.birthdate = birthdate
        return student

    def delete(self, student_id: int) -> Student:
        """Remove and return the first student with ``student_id``."""
        student = self.find(student_id)
        self._students.remove(student)
        return student

    def by_year(self, year: int) -> list[Student]:
        """Return the students born in ``year``, in registry order."""
        return [student for student in self._students if student.birthdate.year == year]


def read_records(lines: Iterable[str]) -> list[tuple[str, int, float]]:
    """Read ``name age gpa`` records until one cannot be parsed.

    Records with a negative age or a GPA outside 0..4 are reported on
    standard error and skipped. Progress is shown every 100 records.
    """
    tokens = deque(token for line in lines for token in line.split())
    records: list[tuple[str, int, float]] = []
    while tokens:
        name = tokens.popleft()
        if len(name) > MAX_NAME_LENGTH - 1:
            tokens.appendleft(name[MAX_NAME_LENGTH - 1:])
            name = name[:MAX_NAME_LENGTH - 1]
        if len(tokens) < 2:
            break
        try:
            age = int(tokens[0])
            gpa = float(tokens[1])
        except ValueError:
            break
        tokens.popleft()
        tokens.popleft()
        if age < 0:
            print("Error: Invalid age", file=sys.stderr)
            continue
        if gpa < 0.0 or gpa > MAX_GPA:
            print("Error: Invalid GPA", file=sys.stderr)
            continue
        records.append((name, age, gpa))
        if len(records) % 100 == 0:
            print(f"Processing record {len(records)}")
    return records


_Ask = Callable[[str], str]


def _add_flow(registry: StudentRegistry, ask: _Ask, out: TextIO) -> None:
    student_id = _scan_int(ask("Enter student ID: "))
    if student_id is None:
        out.write("Invalid ID input.\n")
        return
    name = _field(ask("Enter student name: "))
    course = _field(ask("Enter student course: "))
    try:
        birthdate = parse_date(ask("Enter student birthdate (dd/mm/yyyy): "))
    except ValueError:
        out.write("Invalid date format.\n")
        return
    registry.add(Student(student_id, name, course, birthdate))


def _search_flow(registry: StudentRegistry, ask: _Ask, out: TextIO) -> None:
    student_id = _scan_int(ask("Enter student ID to search: "))
    if student_id is None:
        out.write("Invalid ID input.\n")
        return
    try:
        student = registry.find(student_id)
    except KeyError:
        out.write("Student not found.\n")
        return
    out.write(
        f"Student found:\nID: {student.id}\nName: {student.name}\n"
        f"Course: {student.course}\nBirthdate: {student.birthdate}\n"
    )


def _update_flow(registry: StudentRegistry, ask: _Ask, out: TextIO) -> None:
    student_id = _scan_int(ask("Enter student ID to update: "))
    if student_id is None:
        out.write("Invalid ID input.\n")
        return
    try:
        registry.find(student_id)
    except KeyError:
        out.write("Student not found.\n")
        return
    name = _field(ask("Enter new name: "))
    course = _field(ask("Enter new course: "))
    try:
        birthdate: Optional[Date] = parse_date(ask("Enter new birthdate (dd/mm/yyyy): "))
    except ValueError:
        out.write("Invalid date format. Birthdate not updated.\n")
        birthdate = None
    registry.update(student_id, name, course, birthdate)
    out.write("Student updated successfully.\n")


def _delete_flow(registry: StudentRegistry, ask: _Ask, out: TextIO) -> None:
    student_id = _scan_int(ask("Enter student ID to delete: "))
    if student_id is None:
        out.write("Invalid ID input.\n")
        return
    try:
        registry.delete(student_id)
    except KeyError:
        out.write("Student not found.\n")
        return
    out.write("Student deleted successfully.\n")


def _list_flow(registry: StudentRegistry, ask: _Ask, out: TextIO) -> None:
    year = _scan_int(ask("Enter year to list students: "))
    if year is None:
        out.write("Invalid year input.\n")
        return
    out.write(f"Students enrolled in {year}:\n")
    found = registry.by_year(year)
    for student in found:
        out.write(f"ID: {student.id}, Name: {student.name}, Course: {student.course}\n")
    if not found:
        out.write(f"No students found for the year {year}.\n")


_FLOWS = {
    1: _add_flow,
    2: _search_flow,
    3: _update_flow,
    4: _delete_flow,
    5: _list_flow,
}


def run_menu(lines: Iterable[str], out: TextIO) -> StudentRegistry:
    """Run the menu over input ``lines``, writing to ``out``.

    Stops at the exit option or when input runs out; returns the registry.
    """
    registry = StudentRegistry()
    source = iter(lines)

    def ask(prompt: str) -> str:
        out.write(prompt)
        return next(source, "")

    while True:
        out.write(MENU)
        line = next(source, None)
        if line is None:
            break
        option = _scan_int(line)
        if option is None:
            out.write("Invalid option. Please enter a number.\n")
            continue
        if option == 6:
            out.write("Exiting...\n")
            break
        flow = _FLOWS.get(option)
        if flow is None:
            out.write("Invalid option. Try again.\n")
        else:
            flow(registry, ask, out)
    return registry


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive student menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0