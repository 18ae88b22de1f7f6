"""
Assessment records and their repository.

One record per (teacher, student, grade, subject, term). Saving again under
the same key replaces the score list wholesale and bumps updatedAt; the
record keeps its id and createdAt. The whole collection is read and written
back on every mutation, so two saves of the same key race last-writer-wins.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

import scoring
from record_store import Collection, new_record_id

ASSESSMENTS_KEY = 'zaroda_assessments'

IDENTITY_FIELDS = (
    ('teacher_id', 'teacherId'),
    ('student_id', 'studentId'),
    ('grade', 'grade'),
    ('subject', 'subject'),
)


class ValidationError(ValueError):
    """Candidate record rejected before anything was written."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('; '.join(self.errors))


def _text(value):
    return str(value or '').strip()


@dataclass
class AssessmentRecord:
    teacher_id: str
    student_id: str
    grade: str
    subject: str
    term: int
    teacher_name: str = ''
    student_name: str = ''
    admission_no: str = ''
    school_code: str = ''
    scores: List = field(default_factory=list)
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def key(self):
        return (self.teacher_id, self.student_id, self.grade, self.subject, self.term)

    def to_dict(self):
        return {
            'id': self.id,
            'teacherId': self.teacher_id,
            'teacherName': self.teacher_name,
            'studentId': self.student_id,
            'studentName': self.student_name,
            'admissionNo': self.admission_no,
            'grade': self.grade,
            'subject': self.subject,
            'term': self.term,
            'schoolCode': self.school_code,
            'scores': [s.to_dict() for s in self.scores],
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }

    @classmethod
    def from_dict(cls, data, scheme=None):
        """Decode a stored record. Without a known scheme each score entry's shape decides."""
        scores = []
        for entry in data.get('scores') or []:
            try:
                scores.append(scoring.result_from_dict(entry, scheme or scoring.scheme_of_entry(entry)))
            except ValueError:
                logging.warning("Skipping malformed score entry in record %s: %r", data.get('id'), entry)
        try:
            term = int(data.get('term'))
        except (TypeError, ValueError):
            term = 0
        return cls(
            id=data.get('id'),
            teacher_id=_text(data.get('teacherId')),
            teacher_name=_text(data.get('teacherName')),
            student_id=_text(data.get('studentId')),
            student_name=_text(data.get('studentName')),
            admission_no=_text(data.get('admissionNo')),
            grade=_text(data.get('grade')),
            subject=_text(data.get('subject')),
            term=term,
            school_code=_text(data.get('schoolCode')),
            scores=scores,
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
        )


def record_key(data):
    """Composite key of a stored (dict) record."""
    try:
        term = int(data.get('term'))
    except (TypeError, ValueError):
        term = None
    return (
        _text(data.get('teacherId')),
        _text(data.get('studentId')),
        _text(data.get('grade')),
        _text(data.get('subject')),
        term,
    )


def _default_clock():
    return datetime.now().isoformat()


class AssessmentRepository:

    def __init__(self, store, catalog=None, clock=None, id_factory=None):
        self.collection = Collection(store, ASSESSMENTS_KEY)
        self.catalog = catalog
        self.clock = clock or _default_clock
        self.id_factory = id_factory or new_record_id

    def _scheme_for(self, grade, subject, term):
        if self.catalog is None:
            return None
        found = self.catalog.lookup(grade, subject, term)
        return found.scheme if found else None

    def _decode(self, data):
        return AssessmentRecord.from_dict(data, self._scheme_for(data.get('grade'), data.get('subject'), data.get('term')))

    def validate(self, candidate):
        """Normalise identity fields in place and collect every problem before raising."""
        errors = []
        for attr, label in IDENTITY_FIELDS:
            value = _text(getattr(candidate, attr))
            setattr(candidate, attr, value)
            if not value:
                errors.append(f'{label} is required')
        try:
            candidate.term = int(candidate.term)
        except (TypeError, ValueError):
            errors.append('term must be 1, 2 or 3')
        else:
            if candidate.term not in (1, 2, 3):
                errors.append('term must be 1, 2 or 3')
        for attr in ('teacher_name', 'student_name', 'admission_no', 'school_code'):
            setattr(candidate, attr, _text(getattr(candidate, attr)))

        subject = None
        if self.catalog is not None and not errors:
            subject = self.catalog.lookup(candidate.grade, candidate.subject, candidate.term)

        seen = set()
        for result in candidate.scores or []:
            if not isinstance(result, (scoring.DescriptiveResult, scoring.NumericResult)):
                errors.append(f'Unsupported score entry: {result!r}')
                continue
            if result.key in seen:
                errors.append(f'Duplicate entry for strand {result.strand_number} / {result.sub_strand_name}')
            seen.add(result.key)
            if isinstance(result, scoring.NumericResult):
                result.perf_level = scoring.level_of(result.cat1, result.cat2, result.end_term)
            if subject is None:
                continue
            if result.scheme != subject.scheme:
                errors.append(f'{subject.name} is scored {subject.scheme}; got a {result.scheme} entry')
            elif subject.find_sub_strand(result.strand_number, result.sub_strand_name) is None:
                errors.append(f'Unknown sub-strand {result.strand_number} / {result.sub_strand_name} for {subject.name}')

        if errors:
            raise ValidationError(errors)

    def find(self, teacher_id, student_id, grade, subject, term) -> Optional[AssessmentRecord]:
        try:
            term = int(term)
        except (TypeError, ValueError):
            return None
        key = (_text(teacher_id), _text(student_id), _text(grade), _text(subject), term)
        data = self.collection.find(record_key, key)
        return self._decode(data) if data else None

    def upsert(self, candidate: AssessmentRecord) -> AssessmentRecord:
        self.validate(candidate)
        now = self.clock()
        payload = candidate.to_dict()

        def create(_):
            record = dict(payload)
            record['id'] = self.id_factory()
            record['createdAt'] = now
            record['updatedAt'] = now
            return record

        def replace(existing, _):
            record = dict(payload)
            record['id'] = existing.get('id') or self.id_factory()
            record['createdAt'] = existing.get('createdAt') or now
            record['updatedAt'] = now
            return record

        stored, created = self.collection.upsert(payload, record_key, create, replace)
        logging.info(
            "Assessment %s %s: teacher=%s student=%s %s/%s term %s (%d entries)",
            stored['id'], 'created' if created else 'replaced',
            candidate.teacher_id, candidate.student_id, candidate.grade, candidate.subject,
            candidate.term, len(candidate.scores),
        )
        return self._decode(stored)

    def remove(self, record_id):
        removed = self.collection.remove(record_id)
        if removed:
            logging.info("Assessment %s removed", record_id)
        return removed

    def all(self):
        return [self._decode(r) for r in self.collection.read_all()]

    def list(self, teacher_id=None, grade=None, subject=None, term=None):
        """Records filtered by any combination of teacher, grade, subject and term."""
        def matches(r):
            if teacher_id is not None and _text(r.get('teacherId')) != _text(teacher_id):
                return False
            if grade is not None and _text(r.get('grade')) != _text(grade):
                return False
            if subject is not None and _text(r.get('subject')) != _text(subject):
                return False
            if term is not None and record_key(r)[4] != int(term):
                return False
            return True
        return [self._decode(r) for r in self.collection.filter(matches)]

    def list_assessed_students(self, teacher_id, grade, subject, term):
        return [
            {'studentId': r.student_id, 'studentName': r.student_name, 'admissionNo': r.admission_no}
            for r in self.list(teacher_id=teacher_id, grade=grade, subject=subject, term=term)
        ]

    def summary(self, teacher_id, grade, subject, term, scheme=None):
        """Every assessed student with the overall level of their record."""
        scheme = scheme or self._scheme_for(grade, subject, term)
        rows = []
        for record in self.list(teacher_id=teacher_id, grade=grade, subject=subject, term=term):
            record_scheme = scheme
            if record_scheme is None:
                numeric = any(isinstance(s, scoring.NumericResult) for s in record.scores)
                record_scheme = scoring.NUMERIC if numeric else scoring.DESCRIPTIVE
            level = scoring.overall_level(record.scores, record_scheme)
            rows.append({
                'studentId': record.student_id,
                'studentName': record.student_name,
                'admissionNo': record.admission_no,
                'assessed': len(record.scores),
                'level': level,
                'levelLabel': scoring.level_label(level),
            })
        return rows

    def records_for(self, student_id, admission_no, subject, term):
        """Records of one student (by id or admission number) for a subject and term, any teacher."""
        student_id = _text(student_id)
        admission_no = _text(admission_no)
        subject = _text(subject)
        term = int(term)

        def matches(r):
            same_student = (
                (student_id and _text(r.get('studentId')) == student_id) or
                (admission_no and _text(r.get('admissionNo')) == admission_no)
            )
            return bool(same_student) and _text(r.get('subject')) == subject and record_key(r)[4] == term
        return [self._decode(r) for r in self.collection.filter(matches)]
