"""A student roster kept in insertion order, with a small interactive menu."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TextIO

MENU = "\n1. Add student\n2. Delete student\n3. List students\n4. Exit\nEnter choice: "
SAMPLE_COUNT = 5

_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class RosterEntry:
    """One student on the roster."""

    id: int
    name: str
    major: str
    age: int

    def __str__(self) -> str:
        return f"Student ID: {self.id}, Name: {self.name}, Major: {self.major}, Age: {self.age}"


class StudentList:
    """Students in the order they were added."""

    def __init__(self) -> None:
        self._entries: list[RosterEntry] = []

    def __iter__(self) -> Iterator[RosterEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: RosterEntry) -> None:
        """Append ``entry`` at the end of the roster."""
        self._entries.append(entry)

    def delete(self, student_id: int) -> RosterEntry:
        """Remove and return the first entry with ``student_id``.

        Raises KeyError when no entry has that id.
        """
        for entry in self._entries:
            if entry.id == student_id:
                self._entries.remove(entry)
                return entry
        raise KeyError(student_id)

    def describe(self) -> str:
        """Return one line per student, or a notice when the roster is empty."""
        if not self._entries:
            return "No students in the system.\n"
        return "".join(f"{entry}\n" for entry in self._entries)


def compute_average(grades: Sequence[int]) -> float:
    """Return the mean of ``grades``; raise ValueError when there are none."""
    if not grades:
        raise ValueError("Cannot compute average of empty grades list")
    return sum(grades) / len(grades)


def _scan_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _run(lines: Iterable[str], out: TextIO) -> StudentList:
    students = StudentList()
    for index in range(SAMPLE_COUNT):
        students.add(RosterEntry(index, "John Doe", "Computer Science", 20))

    source = iter(lines)

    def ask(prompt: str) -> str:
        out.write(prompt)
        return next(source, "").rstrip("\n")

    while True:
        out.write(MENU)
        line = next(source, None)
        if line is None:
            break
        choice = _scan_int(line)
        if choice == 1:
            student_id = _scan_int(ask("Enter student ID: "))
            name = ask("Enter student name: ")
            major = ask("Enter student major: ")
            age = _scan_int(ask("Enter student age: "))
            students.add(RosterEntry(student_id, name, major, age))
        elif choice == 2:
            student_id = _scan_int(ask("Enter student ID to delete: "))
            try:
                students.delete(student_id)
            except KeyError:
                out.write(f"Student with ID {student_id} not found!\n")
        elif choice == 3:
            out.write(students.describe())
        elif choice == 4:
            out.write("Exiting...\n")
            break
        else:
            out.write("Invalid choice!\n")
    return students


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the roster menu on standard input and output."""
    _run(sys.stdin, sys.stdout)
    return 0