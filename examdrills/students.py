"""Student score records gathered into sorted linked lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .linked_list import ListNode, list_get


@dataclass(frozen=True)
class Student:
    """An exam number and a course score."""

    no: int
    score: float


@dataclass(frozen=True)
class CourseStudent:
    """A student number, a course number and a score."""

    sno: int
    cno: int
    score: float


def sort_students(students: Iterable[Student]) -> ListNode | None:
    """Link the records into a list ordered by score, lowest score first.

    Returns the head, or ``None`` when there are no records.
    """
    ordered = sorted(students, key=lambda student: student.score)
    return list_get(ordered) if ordered else None


def sort_course_students(students: Iterable[CourseStudent]) -> ListNode | None:
    """Link the records by ascending course number, then descending score.

    Returns the head, or ``None`` when there are no records.
    """
    ordered = sorted(students, key=lambda student: (student.cno, -student.score))
    return list_get(ordered) if ordered else None