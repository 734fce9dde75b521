"""A roster of staff records, newest first, with an experience report."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Employee", "StaffRoster"]

NAME_LIMIT = 19
DEPT_LIMIT = 9
DEFAULT_THRESHOLD = 10


@dataclass(frozen=True)
class Employee:
    """A staff member's name, department and years of experience."""

    name: str
    dept: str
    years: int


class StaffRoster:
    """Staff records, each new one placed at the front."""

    def __init__(self) -> None:
        self._staff: deque[Employee] = deque()

    def add(self, name: str, dept: str, years: int) -> Employee:
        """Add a record at the front and return it.

        Names may hold up to 19 characters and departments up to 9.
        """
        if len(name) > NAME_LIMIT:
            raise ValueError(f"name longer than {NAME_LIMIT} characters")
        if len(dept) > DEPT_LIMIT:
            raise ValueError(f"department longer than {DEPT_LIMIT} characters")
        employee = Employee(name, dept, years)
        self._staff.appendleft(employee)
        return employee

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._staff)

    def __len__(self) -> int:
        return len(self._staff)

    def experienced(self, threshold: int = DEFAULT_THRESHOLD) -> list[Employee]:
        """Records with more than ``threshold`` years, in roster order."""
        return [e for e in self._staff if e.years > threshold]

    def report(self) -> str:
        """Name, department and years of each experienced member, one per line."""
        if not self._staff:
            return "Nothing to display!"
        return "".join(f"{e.name}\n{e.dept}\n{e.years} \n" for e in self.experienced())