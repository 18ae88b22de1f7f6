"""
Class reports: roster + stored assessment records -> ranked table.

Every record is reduced to a 0-100 value per subject, students are ranked on
the mean across the subjects they were assessed in, and per-subject
statistics are gathered for the class.
"""

import csv
from dataclasses import dataclass, field
from io import StringIO
from typing import Dict, List, Optional

from scoring import AE, BE, EE, ME, DescriptiveResult, NumericResult

PLACEHOLDER = '—'

LEVEL_POINTS = {EE: 4, ME: 3, AE: 2, BE: 1}

LETTER_BANDS = (
    (80.0, 'A'),
    (60.0, 'B'),
    (40.0, 'C'),
)

TREND_BANDS = (
    (60.0, 'up'),
    (40.0, 'flat'),
)


def _plain_number(result):
    score = result.score
    if isinstance(score, (int, float)) and not isinstance(score, bool):
        return float(score)
    return None


def _level(result):
    score = result.score
    if isinstance(score, str) and score in LEVEL_POINTS:
        return score
    if isinstance(result, NumericResult):
        return result.perf_level if result.perf_level in LEVEL_POINTS else None
    if isinstance(result, DescriptiveResult):
        return result.level
    return None


def score_value(results):
    """
    Reduce any mix of score entries to one 0-100 value.

    Checked in order, the first tier with any entry decides:
    plain numeric scores, then the mean of complete CAT1/CAT2/End-Term marks,
    then levels mapped EE=4 .. BE=1, averaged and scaled by 25.
    No usable measurement gives 0.
    """
    results = list(results or [])

    numbers = [n for n in (_plain_number(r) for r in results) if n is not None]
    if numbers:
        return sum(numbers) / len(numbers)

    marks = [r.average() for r in results if isinstance(r, NumericResult) and r.is_complete]
    if marks:
        return sum(marks) / len(marks)

    levels = [lvl for lvl in (_level(r) for r in results) if lvl is not None]
    if levels:
        return sum(LEVEL_POINTS[lvl] for lvl in levels) / len(levels) * 25
    return 0.0


def letter_grade(score):
    score = float(score or 0)
    for lower, letter in LETTER_BANDS:
        if score >= lower:
            return letter
    if score > 0:
        return 'D'
    return PLACEHOLDER


def trend(average):
    average = float(average or 0)
    for lower, label in TREND_BANDS:
        if average >= lower:
            return label
    return 'down'


def same_score(a, b):
    return abs(float(a or 0) - float(b or 0)) <= 1e-9


def rank(rows):
    """Sort rows by overall average, best first, and give tied rows the same position."""
    ordered = sorted(rows, key=lambda r: r.overall_average, reverse=True)
    prev_score = None
    current_pos = 0
    for index, row in enumerate(ordered, 1):
        if prev_score is None or not same_score(row.overall_average, prev_score):
            current_pos = index
        row.rank = current_pos
        prev_score = row.overall_average
    return ordered


def _fmt(value):
    return PLACEHOLDER if value is None else f'{value:.1f}'


@dataclass
class ReportRow:
    student_id: str
    student_name: str
    admission_no: str
    # None marks a subject with no records for this student.
    subjects: Dict[str, Optional[float]] = field(default_factory=dict)
    overall_average: float = 0.0
    rank: int = 0

    @property
    def grade(self):
        return letter_grade(self.overall_average)

    def matches(self, query):
        query = (query or '').strip().lower()
        return query in self.student_name.lower() or query in self.admission_no.lower()

    def to_dict(self):
        return {
            'rank': self.rank,
            'studentId': self.student_id,
            'studentName': self.student_name,
            'admissionNo': self.admission_no,
            'subjects': {name: {'average': avg, 'display': _fmt(avg), 'grade': letter_grade(avg)}
                         for name, avg in self.subjects.items()},
            'overallAverage': self.overall_average,
            'grade': self.grade,
        }


@dataclass
class SubjectStats:
    subject: str
    average: float
    highest: float
    lowest: float
    assessed: int
    total: int

    @property
    def trend(self):
        return trend(self.average)

    def to_dict(self):
        return {
            'subject': self.subject,
            'average': self.average,
            'highest': self.highest,
            'lowest': self.lowest,
            'assessed': self.assessed,
            'total': self.total,
            'trend': self.trend,
        }


@dataclass
class ClassReport:
    term: int
    subjects: List[str]
    rows: List[ReportRow]
    subject_stats: List[SubjectStats]
    class_average: float

    def search(self, query):
        """Ranked rows whose name or admission number contains query. Ranks are not recomputed."""
        if not (query or '').strip():
            return list(self.rows)
        return [r for r in self.rows if r.matches(query)]

    def to_dict(self, query=None):
        return {
            'term': self.term,
            'subjects': list(self.subjects),
            'classAverage': self.class_average,
            'rows': [r.to_dict() for r in self.search(query)],
            'subjectStats': [s.to_dict() for s in self.subject_stats],
        }


def subject_stats(rows, subject):
    scores = [r.subjects.get(subject) for r in rows]
    scores = [s for s in scores if s]
    if not scores:
        return SubjectStats(subject, 0.0, 0.0, 0.0, 0, len(rows))
    return SubjectStats(
        subject=subject,
        average=sum(scores) / len(scores),
        highest=max(scores),
        lowest=min(scores),
        assessed=len(scores),
        total=len(rows),
    )


def student_row(student, subjects, repository, term):
    row = ReportRow(
        student_id=student.get('id') or '',
        student_name=student.get('name') or '',
        admission_no=student.get('admissionNo') or '',
    )
    assessed = []
    for subject in subjects:
        records = repository.records_for(row.student_id, row.admission_no, subject, term)
        if not records:
            row.subjects[subject] = None
            continue
        value = score_value([s for record in records for s in record.scores])
        row.subjects[subject] = value
        assessed.append(value)
    row.overall_average = sum(assessed) / len(assessed) if assessed else 0.0
    return row


def build_class_report(roster, repository, class_id, stream_id, term):
    """Ranked report for one class/stream and term."""
    term = int(term)
    students = roster.active_students(class_id, stream_id)
    subjects = roster.assigned_subjects(class_id, stream_id)
    rows = rank([student_row(s, subjects, repository, term) for s in students])
    class_average = sum(r.overall_average for r in rows) / len(rows) if rows else 0.0
    return ClassReport(
        term=term,
        subjects=subjects,
        rows=rows,
        subject_stats=[subject_stats(rows, s) for s in subjects],
        class_average=class_average,
    )


def export_csv(report, query=None):
    """Ranked table as CSV text."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(['Rank', 'Admission No', 'Student'] + list(report.subjects) + ['Average', 'Grade'])
    for row in report.search(query):
        writer.writerow(
            [row.rank, row.admission_no, row.student_name]
            + [_fmt(row.subjects.get(s)) for s in report.subjects]
            + [f'{row.overall_average:.1f}', row.grade]
        )
    return output.getvalue()
