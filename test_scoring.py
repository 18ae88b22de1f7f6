import itertools

import pytest

import scoring
from scoring import AE, BE, EE, LEVELS, ME, DescriptiveResult, NumericResult


@pytest.mark.parametrize(
    "marks, expected",
    [
        ((75, 75, 75), EE),
        ((74.999, 74.999, 74.999), ME),
        ((50, 50, 50), ME),
        ((25, 25, 25), AE),
        ((24.999, 24.999, 24.999), BE),
        ((100, 100, 100), EE),
        ((0, 0, 0), BE),
        ((80, 70, 75), EE),
    ],
)
def test_level_of_band_boundaries(marks, expected):
    assert scoring.level_of(*marks) == expected


def test_level_of_any_missing_input_is_below_expectation():
    assert scoring.level_of(100, 100, None) == BE
    assert scoring.level_of(None, 100, 100) == BE
    assert scoring.level_of(100, "", 100) == BE
    assert scoring.level_of(100, "abc", 100) == BE


def test_level_of_never_drops_as_average_rises():
    triples = sorted(itertools.product(range(0, 101, 5), repeat=3), key=sum)
    previous_sum, previous_rank = None, None
    for marks in triples:
        rank = LEVELS.index(scoring.level_of(*marks))
        if previous_sum == sum(marks):
            assert rank == previous_rank, marks
        elif previous_rank is not None:
            assert rank <= previous_rank, marks
        previous_sum, previous_rank = sum(marks), rank


def test_overall_numeric_ignores_incomplete_sub_strands():
    results = [
        NumericResult(1, "A", cat1=80, cat2=80, end_term=80),
        NumericResult(1, "B", cat1=60, cat2=60, end_term=60),
        NumericResult(2, "C", cat1=0, cat2=None, end_term=0),
    ]
    # (80 + 60) / 2 = 70
    assert scoring.overall_level(results, scoring.NUMERIC) == ME


def test_overall_numeric_with_nothing_complete_is_below_expectation():
    results = [NumericResult(1, "A", cat1=90)]
    assert scoring.overall_level(results, scoring.NUMERIC) == BE
    assert scoring.overall_level([], scoring.NUMERIC) == BE


def test_overall_descriptive_tie_prefers_higher_level():
    results = [
        DescriptiveResult(1, "A", level=EE),
        DescriptiveResult(1, "B", level=ME),
        DescriptiveResult(2, "C", level=EE),
        DescriptiveResult(2, "D", level=ME),
    ]
    assert scoring.overall_level(results, scoring.DESCRIPTIVE) == EE


def test_overall_descriptive_modal_level_wins():
    results = [
        DescriptiveResult(1, "A", level=AE),
        DescriptiveResult(1, "B", level=AE),
        DescriptiveResult(2, "C", level=EE),
        DescriptiveResult(2, "D", level=None),
    ]
    assert scoring.overall_level(results, scoring.DESCRIPTIVE) == AE


def test_overall_descriptive_empty_is_below_expectation():
    assert scoring.overall_level([], scoring.DESCRIPTIVE) == BE
    assert scoring.overall_level([DescriptiveResult(1, "A")], scoring.DESCRIPTIVE) == BE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", (True, None)),
        (None, (True, None)),
        ("55", (True, 55.0)),
        (150, (True, 100.0)),
        (-5, (True, 0.0)),
        ("abc", (False, None)),
        (float("nan"), (False, None)),
        (float("inf"), (False, None)),
        (True, (False, None)),
    ],
)
def test_clamp_score(raw, expected):
    assert scoring.clamp_score(raw) == expected


def test_set_component_recomputes_level_on_every_change():
    result = NumericResult(1, "Numbers")
    assert scoring.set_component(result, "cat1", "80") is True
    assert scoring.set_component(result, "cat2", 90) is True
    assert result.perf_level == BE
    assert scoring.set_component(result, "end_term", 200) is True
    assert result.end_term == 100.0
    assert result.perf_level == EE

    assert scoring.set_component(result, "cat2", "") is True
    assert result.cat2 is None
    assert result.perf_level == BE


def test_set_component_rejects_malformed_and_keeps_old_value():
    result = NumericResult(1, "Numbers", cat1=40)
    assert scoring.set_component(result, "cat1", "forty") is False
    assert result.cat1 == 40


def test_set_component_refuses_wrong_scheme_and_field():
    with pytest.raises(TypeError):
        scoring.set_component(DescriptiveResult(1, "A"), "cat1", 10)
    with pytest.raises(ValueError):
        scoring.set_component(NumericResult(1, "A"), "cat3", 10)


def test_set_level_sets_exactly_one_flag():
    result = DescriptiveResult(1, "Listening")
    scoring.set_level(result, ME)
    data = result.to_dict()
    assert [data["ee"], data["me"], data["ae"], data["be"]] == [False, True, False, False]
    with pytest.raises(ValueError):
        scoring.set_level(result, "XX")


def test_result_from_dict_ignores_fields_of_other_scheme():
    entry = {"strandNumber": "2", "subStrandName": "Fractions", "cat1": 70, "ee": True, "comment": " good "}
    numeric = scoring.result_from_dict(entry, scoring.NUMERIC)
    assert isinstance(numeric, NumericResult)
    assert numeric.strand_number == 2
    assert numeric.cat1 == 70
    assert numeric.comment == "good"
    assert numeric.perf_level == BE

    descriptive = scoring.result_from_dict(entry, scoring.DESCRIPTIVE)
    assert isinstance(descriptive, DescriptiveResult)
    assert descriptive.level == EE
    assert "cat1" not in descriptive.to_dict()


def test_result_from_dict_requires_identity():
    with pytest.raises(ValueError):
        scoring.result_from_dict({"subStrandName": "A"}, scoring.DESCRIPTIVE)
    with pytest.raises(ValueError):
        scoring.result_from_dict({"strandNumber": 1, "subStrandName": "  "}, scoring.DESCRIPTIVE)


def test_result_from_dict_rejects_more_than_one_level():
    entry = {"strandNumber": 1, "subStrandName": "Listening", "ee": True, "be": True}
    with pytest.raises(ValueError, match="EE, BE"):
        scoring.result_from_dict(entry, scoring.DESCRIPTIVE)

    entry["be"] = False
    assert scoring.result_from_dict(entry, scoring.DESCRIPTIVE).level == EE


def test_scheme_of_entry_guesses_from_shape():
    assert scoring.scheme_of_entry({"cat1": 10}) == scoring.NUMERIC
    assert scoring.scheme_of_entry({"ee": True}) == scoring.DESCRIPTIVE


def test_level_label():
    assert scoring.level_label(EE) == "Exceeding Expectation"
    assert scoring.level_label("nope") == ""
