"""
Scoring rules for competency-based assessment.

Two schemes exist and never mix:

- DESCRIPTIVE ('ee_me_ae_be'): each sub-strand is marked with one of four
  levels, EE / ME / AE / BE.
- NUMERIC ('cat_endterm'): each sub-strand gets CAT1, CAT2 and End-Term marks
  in [0, 100]; their mean maps to a level.

A sub-strand result is either a DescriptiveResult or a NumericResult. Field
updates go through the setters below so out-of-range or malformed input is
handled at entry time and the level functions can trust their inputs.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Union

DESCRIPTIVE = 'ee_me_ae_be'
NUMERIC = 'cat_endterm'
SCHEMES = (DESCRIPTIVE, NUMERIC)

EE = 'EE'
ME = 'ME'
AE = 'AE'
BE = 'BE'

# Highest first. Also the tie-break order for descriptive tallies.
LEVELS = (EE, ME, AE, BE)

LEVEL_LABELS = {
    EE: 'Exceeding Expectation',
    ME: 'Meeting Expectation',
    AE: 'Approaching Expectation',
    BE: 'Below Expectation',
}

# (lower bound inclusive, level), checked top down.
LEVEL_BANDS = (
    (75.0, EE),
    (50.0, ME),
    (25.0, AE),
)

SCORE_MIN = 0.0
SCORE_MAX = 100.0

COMPONENTS = ('cat1', 'cat2', 'end_term')


@dataclass
class DescriptiveResult:
    strand_number: int
    sub_strand_name: str
    level: Optional[str] = None
    comment: Optional[str] = None
    # Plain score carried by imported records: a number or a level tag.
    score: Union[float, str, None] = None

    scheme = DESCRIPTIVE

    @property
    def key(self):
        return (self.strand_number, self.sub_strand_name)

    def to_dict(self):
        data = {
            'strandNumber': self.strand_number,
            'subStrandName': self.sub_strand_name,
            'ee': self.level == EE,
            'me': self.level == ME,
            'ae': self.level == AE,
            'be': self.level == BE,
        }
        if self.comment:
            data['comment'] = self.comment
        if self.score is not None:
            data['score'] = self.score
        return data


@dataclass
class NumericResult:
    strand_number: int
    sub_strand_name: str
    cat1: Optional[float] = None
    cat2: Optional[float] = None
    end_term: Optional[float] = None
    perf_level: Optional[str] = None
    comment: Optional[str] = None
    score: Union[float, str, None] = None

    scheme = NUMERIC

    @property
    def key(self):
        return (self.strand_number, self.sub_strand_name)

    @property
    def is_complete(self):
        return self.cat1 is not None and self.cat2 is not None and self.end_term is not None

    def average(self):
        """Mean of the three components, or None while any is missing."""
        if not self.is_complete:
            return None
        return (self.cat1 + self.cat2 + self.end_term) / 3

    def to_dict(self):
        data = {
            'strandNumber': self.strand_number,
            'subStrandName': self.sub_strand_name,
        }
        if self.cat1 is not None:
            data['cat1'] = self.cat1
        if self.cat2 is not None:
            data['cat2'] = self.cat2
        if self.end_term is not None:
            data['endTerm'] = self.end_term
        if self.perf_level:
            data['perfLevel'] = self.perf_level
        if self.comment:
            data['comment'] = self.comment
        if self.score is not None:
            data['score'] = self.score
        return data


def level_from_average(avg):
    """Map a 0-100 average to a performance level."""
    for lower, level in LEVEL_BANDS:
        if avg >= lower:
            return level
    return BE


def _as_number(value):
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def level_of(cat1, cat2, end_term):
    """Level for one numeric sub-strand. Any missing or non-numeric input gives BE."""
    values = [_as_number(cat1), _as_number(cat2), _as_number(end_term)]
    if any(v is None for v in values):
        return BE
    return level_from_average(sum(values) / 3)


def overall_level(results, scheme):
    """Collapse all recorded sub-strand results of one student/subject/term into one level."""
    if scheme == NUMERIC:
        complete = [r for r in results if isinstance(r, NumericResult) and r.is_complete]
        if not complete:
            return BE
        avg = sum(r.average() for r in complete) / len(complete)
        return level_from_average(avg)

    counts = {level: 0 for level in LEVELS}
    for result in results:
        level = getattr(result, 'level', None)
        if level in counts:
            counts[level] += 1
    top = max(counts.values())
    if top == 0:
        return BE
    for level in LEVELS:
        if counts[level] == top:
            return level
    return BE


def level_label(level):
    return LEVEL_LABELS.get(level, '')


def clamp_score(raw):
    """
    Parse and clamp a raw mark for storage.

    Returns (ok, value): ('', None) clears the field and is ok; numbers are
    clamped into [0, 100]; anything malformed returns ok=False.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return True, None
    number = _as_number(raw)
    if number is None:
        return False, None
    return True, max(SCORE_MIN, min(SCORE_MAX, number))


def set_component(result, field, raw):
    """Set cat1, cat2 or end_term on a NumericResult. Returns False when input is rejected."""
    if not isinstance(result, NumericResult):
        raise TypeError('Numeric marks can only be set on a cat_endterm result')
    if field not in COMPONENTS:
        raise ValueError(f'Unknown score component: {field}')
    ok, value = clamp_score(raw)
    if not ok:
        return False
    setattr(result, field, value)
    # Missing marks derive BE, same as level_of.
    result.perf_level = level_of(result.cat1, result.cat2, result.end_term)
    return True


def set_level(result, level):
    if not isinstance(result, DescriptiveResult):
        raise TypeError('Levels can only be set on an ee_me_ae_be result')
    if level is not None and level not in LEVELS:
        raise ValueError(f'Unknown performance level: {level}')
    result.level = level


def set_comment(result, comment):
    text = (comment or '').strip()
    result.comment = text or None


def new_result(scheme, strand_number, sub_strand_name):
    if scheme == NUMERIC:
        return NumericResult(strand_number, sub_strand_name)
    if scheme == DESCRIPTIVE:
        return DescriptiveResult(strand_number, sub_strand_name)
    raise ValueError(f'Unknown scoring scheme: {scheme}')


def _flag_level(data):
    flagged = [level for level in LEVELS if data.get(level.lower()) is True]
    if len(flagged) > 1:
        raise ValueError(f"Only one level may be set, got {', '.join(flagged)}")
    return flagged[0] if flagged else None


def result_from_dict(data, scheme):
    """
    Build a result of the given scheme from a stored or submitted score entry.

    Fields belonging to the other scheme are ignored. Numeric marks pass
    through the same clamp as interactive entry; malformed marks are dropped.
    """
    try:
        strand_number = int(data.get('strandNumber'))
    except (TypeError, ValueError):
        raise ValueError('strandNumber must be an integer') from None
    sub_strand_name = str(data.get('subStrandName') or '').strip()
    if not sub_strand_name:
        raise ValueError('subStrandName is required')

    result = new_result(scheme, strand_number, sub_strand_name)
    if scheme == NUMERIC:
        set_component(result, 'cat1', data.get('cat1'))
        set_component(result, 'cat2', data.get('cat2'))
        set_component(result, 'end_term', data.get('endTerm'))
    else:
        set_level(result, _flag_level(data))
    set_comment(result, data.get('comment'))
    result.score = _plain_score(data.get('score'))
    return result


def _plain_score(value):
    if isinstance(value, str):
        return value if value in LEVELS else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def results_from_dicts(entries, scheme) -> List:
    return [result_from_dict(entry, scheme) for entry in (entries or [])]


def scheme_of_entry(data):
    """Guess the scheme of a stored entry when the subject is not in the catalog."""
    if any(k in data for k in ('cat1', 'cat2', 'endTerm', 'perfLevel')):
        return NUMERIC
    return DESCRIPTIVE
