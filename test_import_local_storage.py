import importlib.util
import json
from pathlib import Path

import pytest


@pytest.fixture
def tool():
    path = Path(__file__).parent / "tools" / "import_local_storage.py"
    spec = importlib.util.spec_from_file_location("import_local_storage", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_collect_keeps_assessment_book_keys_only(tool):
    export = {
        "zaroda_assessments": json.dumps([{"id": "r1"}]),
        "zaroda_hoi_students": [{"id": "S1"}],
        "zaroda_class_students_T1_Grade 1": "[]",
        "zaroda_hoi_invoices": "[]",
        "theme": "dark",
    }
    rows, problems = tool.collect(export)
    assert rows == [
        ("zaroda_assessments", [{"id": "r1"}]),
        ("zaroda_class_students_T1_Grade 1", []),
        ("zaroda_hoi_students", [{"id": "S1"}]),
    ]
    assert problems == []


def test_collect_reports_unusable_values(tool):
    rows, problems = tool.collect({
        "zaroda_assessments": "{broken",
        "zaroda_hoi_subject_assignments": json.dumps({"not": "a list"}),
    })
    assert rows == []
    assert problems == [
        "zaroda_assessments: not valid JSON, skipped",
        "zaroda_hoi_subject_assignments: expected a list, got dict, skipped",
    ]


def test_import_rows_upserts_json_text(tool, monkeypatch):
    captured = {}

    def fake_execute_batch(cur, query, params, page_size=100):
        captured["query"] = query
        captured["params"] = params

    monkeypatch.setattr(tool, "execute_batch", fake_execute_batch)
    tool.import_rows(object(), [("zaroda_assessments", [{"id": "r1"}])])
    assert "ON CONFLICT (key) DO UPDATE" in captured["query"]
    assert captured["params"] == [("zaroda_assessments", '[{"id": "r1"}]')]
