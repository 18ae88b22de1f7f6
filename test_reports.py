import csv
from io import StringIO

import pytest

import curriculum
import reports
import scoring
from assessments import ASSESSMENTS_KEY, AssessmentRepository
from record_store import MemoryRecordStore
from rosters import StoreRosterSource
from scoring import AE, BE, EE, DescriptiveResult, NumericResult


@pytest.mark.parametrize(
    "score, expected",
    [(80, "A"), (79.9, "B"), (60, "B"), (40, "C"), (39.9, "D"), (0.1, "D"), (0, "—"), (None, "—")],
)
def test_letter_grade(score, expected):
    assert reports.letter_grade(score) == expected


@pytest.mark.parametrize("average, expected", [(60, "up"), (59.9, "flat"), (40, "flat"), (39.9, "down")])
def test_trend(average, expected):
    assert reports.trend(average) == expected


def test_score_value_prefers_plain_numbers():
    results = [
        DescriptiveResult(1, "A", score=70),
        DescriptiveResult(1, "B", score=90),
        DescriptiveResult(1, "C", level=BE),
    ]
    assert reports.score_value(results) == 80


def test_score_value_maps_levels_when_no_numbers():
    results = [DescriptiveResult(1, "A", level=EE), DescriptiveResult(1, "B", score=AE)]
    # (4 + 2) / 2 * 25
    assert reports.score_value(results) == 75


def test_score_value_uses_complete_numeric_marks():
    results = [
        NumericResult(1, "A", cat1=80, cat2=80, end_term=80),
        NumericResult(1, "B", cat1=60, cat2=60, end_term=60),
        NumericResult(1, "C", cat1=10),
    ]
    assert reports.score_value(results) == 70


def test_score_value_plain_numbers_outrank_marks():
    results = [
        NumericResult(1, "A", score=90),
        NumericResult(1, "B", cat1=30, cat2=30, end_term=30),
    ]
    assert reports.score_value(results) == 90


def test_score_value_partial_marks_count_as_below_expectation():
    result = NumericResult(1, "A")
    scoring.set_component(result, "cat1", 95)
    assert reports.score_value([result]) == 25


def test_score_value_without_measurement_is_zero():
    assert reports.score_value([]) == 0
    assert reports.score_value([DescriptiveResult(1, "A")]) == 0


def test_rank_shares_position_on_ties():
    rows = [
        reports.ReportRow("s1", "A", "1", overall_average=70),
        reports.ReportRow("s2", "B", "2", overall_average=90),
        reports.ReportRow("s3", "C", "3", overall_average=90),
    ]
    ranked = reports.rank(rows)
    assert [r.student_id for r in ranked] == ["s2", "s3", "s1"]
    assert [r.rank for r in ranked] == [1, 1, 3]


def _seed_school(store):
    store.put("zaroda_hoi_students", [
        {"id": "S1", "full_name": "Amani Otieno", "admission_no": "ADM001", "class_id": "C1", "stream_id": "E", "status": "active"},
        {"id": "S2", "full_name": "Baraka Kip", "admission_no": "ADM002", "class_id": "C1", "stream_id": "E", "status": "active"},
        {"id": "S3", "full_name": "Chebet Njeri", "admission_no": "ADM003", "class_id": "C1", "stream_id": "E", "status": "active"},
        {"id": "S4", "full_name": "Left School", "admission_no": "ADM004", "class_id": "C1", "stream_id": "E", "status": "transferred"},
        {"id": "S5", "full_name": "Other Stream", "admission_no": "ADM005", "class_id": "C1", "stream_id": "W", "status": "active"},
    ])
    store.put("zaroda_hoi_subject_assignments", [
        {"id": "a1", "class_id": "C1", "stream_id": "E", "subject_name": "Mathematics Activities"},
        {"id": "a2", "class_id": "C1", "stream_id": "E", "subject_name": "Kiswahili"},
        {"id": "a3", "class_id": "C1", "stream_id": "E", "subject_name": "Mathematics Activities"},
    ])
    store.put(ASSESSMENTS_KEY, [
        {"id": "r1", "teacherId": "T1", "studentId": "S1", "admissionNo": "ADM001", "grade": "Grade 1",
         "subject": "Mathematics Activities", "term": 1,
         "scores": [{"strandNumber": 1, "subStrandName": "Addition", "cat1": 90, "cat2": 90, "endTerm": 90}]},
        {"id": "r2", "teacherId": "T1", "studentId": "S1", "admissionNo": "ADM001", "grade": "Grade 1",
         "subject": "Kiswahili", "term": 1,
         "scores": [{"strandNumber": 1, "subStrandName": "Kusikiliza", "score": 70}]},
        # Saved from a teacher's own class list: matched by admission number.
        {"id": "r3", "teacherId": "T2", "studentId": "stu-local", "admissionNo": "ADM002", "grade": "Grade 1",
         "subject": "Mathematics Activities", "term": 1,
         "scores": [{"strandNumber": 1, "subStrandName": "Addition", "cat1": 80, "cat2": 80, "endTerm": 80}]},
        {"id": "r4", "teacherId": "T1", "studentId": "S2", "admissionNo": "ADM002", "grade": "Grade 1",
         "subject": "Mathematics Activities", "term": 2,
         "scores": [{"strandNumber": 1, "subStrandName": "Addition", "cat1": 10, "cat2": 10, "endTerm": 10}]},
    ])


@pytest.fixture
def report():
    store = MemoryRecordStore()
    _seed_school(store)
    repository = AssessmentRepository(store, catalog=curriculum.catalog)
    return reports.build_class_report(StoreRosterSource(store), repository, "C1", "E", 1)


def test_class_report_rows(report):
    assert report.subjects == ["Mathematics Activities", "Kiswahili"]
    by_id = {r.student_id: r for r in report.rows}
    assert set(by_id) == {"S1", "S2", "S3"}

    assert by_id["S1"].subjects == {"Mathematics Activities": 90, "Kiswahili": 70}
    assert by_id["S1"].overall_average == 80
    assert by_id["S1"].grade == "A"

    # Unassessed subjects are left out of the overall average.
    assert by_id["S2"].subjects == {"Mathematics Activities": 80, "Kiswahili": None}
    assert by_id["S2"].overall_average == 80

    assert by_id["S3"].overall_average == 0
    assert by_id["S3"].grade == "—"


def test_class_report_ranks_everyone(report):
    assert [(r.student_id, r.rank) for r in report.rows] == [("S1", 1), ("S2", 1), ("S3", 3)]


def test_class_report_subject_stats_and_average(report):
    maths, kiswahili = report.subject_stats
    assert (maths.average, maths.highest, maths.lowest, maths.assessed, maths.total) == (85, 90, 80, 2, 3)
    assert maths.trend == "up"
    assert (kiswahili.assessed, kiswahili.total) == (1, 3)
    assert report.class_average == pytest.approx(160 / 3)


def test_class_report_search_keeps_ranks(report):
    found = report.search("adm002")
    assert [(r.student_id, r.rank) for r in found] == [("S2", 1)]
    assert [r.student_id for r in report.search("chebet")] == ["S3"]
    assert len(report.search("")) == 3


def test_class_report_to_dict(report):
    data = report.to_dict(query="amani")
    assert data["term"] == 1
    assert len(data["rows"]) == 1
    row = data["rows"][0]
    assert row["subjects"]["Kiswahili"] == {"average": 70, "display": "70.0", "grade": "B"}
    assert data["subjectStats"][0]["trend"] == "up"


def test_export_csv(report):
    rows = list(csv.reader(StringIO(reports.export_csv(report))))
    assert rows[0] == ["Rank", "Admission No", "Student", "Mathematics Activities", "Kiswahili", "Average", "Grade"]
    assert rows[1] == ["1", "ADM001", "Amani Otieno", "90.0", "70.0", "80.0", "A"]
    assert rows[2] == ["1", "ADM002", "Baraka Kip", "80.0", "—", "80.0", "A"]
    assert rows[3][-2:] == ["0.0", "—"]


def test_empty_class_report():
    store = MemoryRecordStore()
    repository = AssessmentRepository(store)
    report = reports.build_class_report(StoreRosterSource(store), repository, "C9", "X", 3)
    assert report.rows == []
    assert report.subject_stats == []
    assert report.class_average == 0
