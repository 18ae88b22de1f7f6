import itertools

import pytest

import curriculum
from assessments import AssessmentRecord, AssessmentRepository, ValidationError
from record_store import MemoryRecordStore
from rosters import StoreRosterSource, TeacherClassList, class_list_key


@pytest.fixture
def store():
    return MemoryRecordStore({
        "zaroda_hoi_students": [
            {"id": "S1", "full_name": "Amani", "admission_no": "A1", "class_id": "C1", "stream_id": "E", "status": "active"},
            {"id": "S2", "full_name": "Baraka", "admission_no": "A2", "class_id": "C1", "stream_id": "E", "status": "graduated"},
        ],
        "zaroda_hoi_subject_assignments": [
            {"class_id": "C1", "stream_id": "E", "subject_name": "Kiswahili"},
            {"class_id": "C1", "stream_id": "E", "subject_name": "Kiswahili"},
            {"class_id": "C1", "stream_id": "W", "subject_name": "Mathematics Activities"},
        ],
    })


def test_active_students_only(store):
    assert StoreRosterSource(store).active_students("C1", "E") == [{"id": "S1", "name": "Amani", "admissionNo": "A1"}]


def test_assigned_subjects_are_distinct(store):
    roster = StoreRosterSource(store)
    assert roster.assigned_subjects("C1", "E") == ["Kiswahili"]
    assert roster.assigned_subjects("C2", "E") == []


def test_add_student_persists_under_teacher_grade_key(store):
    ids = (f"stu-{n}" for n in itertools.count(1))
    class_list = TeacherClassList(store, id_factory=lambda: next(ids))
    student = class_list.add_student("T1", "Grade 1", "  Zawadi  ", "ADM9")
    assert student == {"id": "stu-1", "name": "Zawadi", "admissionNo": "ADM9"}
    assert store.get(class_list_key("T1", "Grade 1")) == [student]
    assert class_list.students("T1", "Grade 1") == [student]
    assert class_list.students("T1", "Grade 2") == []


def test_add_student_requires_name_and_admission_number(store):
    with pytest.raises(ValidationError) as excinfo:
        TeacherClassList(store).add_student("T1", "Grade 1", "", " ")
    assert excinfo.value.errors == ["name is required", "admissionNo is required"]


def test_add_student_rejects_duplicate_admission_number(store):
    class_list = TeacherClassList(store)
    class_list.add_student("T1", "Grade 1", "Zawadi", "ADM9")
    with pytest.raises(ValidationError):
        class_list.add_student("T1", "Grade 1", "Someone Else", "ADM9")
    assert len(class_list.students("T1", "Grade 1")) == 1


def test_students_merges_assessed_students(store):
    class_list = TeacherClassList(store, id_factory=lambda: "stu-1")
    class_list.add_student("T1", "Grade 1", "Zawadi", "ADM9")
    repository = AssessmentRepository(store, catalog=curriculum.catalog)
    repository.upsert(AssessmentRecord(
        teacher_id="T1", student_id="S1", student_name="Amani", admission_no="A1",
        grade="Grade 1", subject="Mathematics Activities", term=1,
    ))
    students = class_list.students("T1", "Grade 1", repository=repository, subject="Mathematics Activities", term=1)
    assert students == [
        {"id": "stu-1", "name": "Zawadi", "admissionNo": "ADM9"},
        {"id": "S1", "name": "Amani", "admissionNo": "A1"},
    ]
