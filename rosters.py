"""
Roster collaborators.

StoreRosterSource reads the school-wide student and subject-assignment lists
kept by the head-of-institution screens. TeacherClassList is the teacher's own
list of students for a grade, which the assessment book merges with everyone
already assessed.
"""

import logging

from assessments import ValidationError
from record_store import Collection, new_record_id

STUDENTS_KEY = 'zaroda_hoi_students'
SUBJECT_ASSIGNMENTS_KEY = 'zaroda_hoi_subject_assignments'
ACTIVE = 'active'


def class_list_key(teacher_id, grade):
    return f'zaroda_class_students_{teacher_id}_{grade}'


class StoreRosterSource:

    def __init__(self, store):
        self.students = Collection(store, STUDENTS_KEY)
        self.assignments = Collection(store, SUBJECT_ASSIGNMENTS_KEY)

    def active_students(self, class_id, stream_id):
        """Active students of one class/stream, as {'id', 'name', 'admissionNo'}."""
        rows = self.students.filter(
            lambda s: s.get('class_id') == class_id
            and s.get('stream_id') == stream_id
            and s.get('status') == ACTIVE
        )
        return [
            {'id': s.get('id'), 'name': s.get('full_name') or '', 'admissionNo': s.get('admission_no') or ''}
            for s in rows
        ]

    def assigned_subjects(self, class_id, stream_id):
        """Distinct subject names assigned to a class/stream, first assignment first."""
        names = []
        for a in self.assignments.filter(lambda a: a.get('class_id') == class_id and a.get('stream_id') == stream_id):
            name = a.get('subject_name')
            if name and name not in names:
                names.append(name)
        return names


def _new_student_id():
    return 'stu-' + new_record_id()


class TeacherClassList:

    def __init__(self, store, id_factory=None):
        self.store = store
        self.id_factory = id_factory or _new_student_id

    def _collection(self, teacher_id, grade):
        return Collection(self.store, class_list_key(teacher_id, grade))

    def students(self, teacher_id, grade, repository=None, subject=None, term=None):
        """
        The teacher's saved list for a grade. When a repository, subject and
        term are given, students already assessed there are merged in by id,
        with the assessment record's name and admission number taking over.
        """
        merged = {}
        for s in self._collection(teacher_id, grade).read_all():
            merged[s.get('id')] = {'id': s.get('id'), 'name': s.get('name') or '', 'admissionNo': s.get('admissionNo') or ''}
        if repository is not None and subject and term:
            for s in repository.list_assessed_students(teacher_id, grade, subject, term):
                merged[s['studentId']] = {'id': s['studentId'], 'name': s['studentName'], 'admissionNo': s['admissionNo']}
        return list(merged.values())

    def add_student(self, teacher_id, grade, name, admission_no):
        name = (name or '').strip()
        admission_no = (admission_no or '').strip()
        errors = []
        if not name:
            errors.append('name is required')
        if not admission_no:
            errors.append('admissionNo is required')
        if errors:
            raise ValidationError(errors)

        candidate = {'name': name, 'admissionNo': admission_no}

        def create(c):
            return {'id': self.id_factory(), 'name': c['name'], 'admissionNo': c['admissionNo']}

        def replace(existing, c):
            raise ValidationError([f'A student with admission number {c["admissionNo"]} already exists'])

        student, _ = self._collection(teacher_id, grade).upsert(
            candidate, lambda s: (s.get('admissionNo') or '').strip(), create, replace,
        )
        logging.info("Student %s (%s) added to %s class list of teacher %s", student['id'], admission_no, grade, teacher_id)
        return student
