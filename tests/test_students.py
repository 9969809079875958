from examdrills.linked_list import iter_list
from examdrills.students import (
    CourseStudent,
    Student,
    sort_course_students,
    sort_students,
)


def test_sort_students_source_case():
    records = [Student(1, 3), Student(2, 25), Student(3, 18), Student(4, 48)]
    result = list(iter_list(sort_students(records)))
    assert [(s.no, s.score) for s in result] == [(1, 3), (3, 18), (2, 25), (4, 48)]


def test_sort_students_does_not_mutate_input():
    records = [Student(1, 3), Student(2, 25)]
    sort_students(records)
    assert records == [Student(1, 3), Student(2, 25)]


def test_sort_students_empty():
    assert sort_students([]) is None


def test_sort_students_keeps_every_record():
    records = [Student(n, s) for n, s in [(7, 1.5), (8, 0.5), (9, 2.5)]]
    result = list(iter_list(sort_students(records)))
    assert sorted(result, key=lambda s: s.no) == records


def test_sort_course_students_source_case():
    records = [
        CourseStudent(1, 3, 15),
        CourseStudent(2, 3, 25),
        CourseStudent(3, 3, 18),
        CourseStudent(4, 1, 48),
    ]
    result = list(iter_list(sort_course_students(records)))
    assert [(s.sno, s.cno, s.score) for s in result] == [
        (4, 1, 48),
        (2, 3, 25),
        (3, 3, 18),
        (1, 3, 15),
    ]


def test_sort_course_students_empty():
    assert sort_course_students([]) is None