"""
Curriculum catalog: grade -> term -> subject -> strand -> sub-strand.

The tree is built once from curriculum_data.FRAMEWORK when this module is
imported and is read-only afterwards. Grade and subject lookups are
case-insensitive. A miss returns None; callers decide what to show.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import curriculum_data
from scoring import SCHEMES

TERMS = (1, 2, 3)


@dataclass(frozen=True)
class SubStrand:
    name: str
    details: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Strand:
    number: int
    theme: str
    sub_strands: Tuple[SubStrand, ...] = ()

    def sub_strand(self, name):
        for sub in self.sub_strands:
            if sub.name == name:
                return sub
        return None


@dataclass(frozen=True)
class Subject:
    name: str
    scheme: str
    strands: Tuple[Strand, ...] = ()

    @property
    def sub_strand_count(self):
        return sum(len(s.sub_strands) for s in self.strands)

    def strand(self, number):
        for strand in self.strands:
            if strand.number == number:
                return strand
        return None

    def find_sub_strand(self, strand_number, name):
        strand = self.strand(strand_number)
        if strand is None:
            return None
        return strand.sub_strand(name)

    def to_dict(self):
        return {
            'subject': self.name,
            'scoringType': self.scheme,
            'strands': [
                {
                    'number': strand.number,
                    'theme': strand.theme,
                    'subStrands': [
                        {'name': sub.name, 'details': list(sub.details)} if sub.details else {'name': sub.name}
                        for sub in strand.sub_strands
                    ],
                }
                for strand in self.strands
            ],
        }


@dataclass(frozen=True)
class Term:
    number: int
    subjects: Tuple[Subject, ...] = ()


@dataclass(frozen=True)
class Grade:
    name: str
    terms: Tuple[Term, ...] = ()


def _build_strands(raw_strands, where):
    strands = []
    seen_numbers = set()
    for raw in raw_strands:
        number = int(raw['number'])
        if number in seen_numbers:
            logging.warning("Duplicate strand %s in %s; keeping the first definition", number, where)
            continue
        seen_numbers.add(number)
        subs = []
        seen_names = set()
        for raw_sub in raw.get('sub_strands', []):
            name = raw_sub['name']
            if name in seen_names:
                logging.warning("Duplicate sub-strand %r in strand %s of %s", name, number, where)
                continue
            seen_names.add(name)
            subs.append(SubStrand(name=name, details=tuple(raw_sub.get('details', ()))))
        strands.append(Strand(number=number, theme=raw.get('theme', ''), sub_strands=tuple(subs)))
    return tuple(strands)


def _build_grade(raw_grade):
    terms = []
    for raw_term in raw_grade.get('terms', []):
        subjects = []
        for raw_subject in raw_term.get('subjects', []):
            scheme = raw_subject['scoring']
            if scheme not in SCHEMES:
                raise ValueError(f"Unknown scoring scheme {scheme!r} for {raw_subject['subject']}")
            where = f"{raw_grade['grade']} term {raw_term['term']} {raw_subject['subject']}"
            subjects.append(Subject(
                name=raw_subject['subject'],
                scheme=scheme,
                strands=_build_strands(raw_subject.get('strands', []), where),
            ))
        terms.append(Term(number=int(raw_term['term']), subjects=tuple(subjects)))
    return Grade(name=raw_grade['grade'], terms=tuple(terms))


class CurriculumCatalog:
    """Indexed, read-only view over the grade tree."""

    def __init__(self, grades):
        self._ordered: List[Grade] = []
        self._grades: Dict[str, Grade] = {}
        self._subjects: Dict[Tuple[str, int, str], Subject] = {}
        for grade in grades:
            key = grade.name.lower()
            if key in self._grades:
                logging.warning("Duplicate grade %r in curriculum data; keeping the first", grade.name)
                continue
            self._grades[key] = grade
            self._ordered.append(grade)
            for term in grade.terms:
                for subject in term.subjects:
                    self._subjects.setdefault((key, term.number, subject.name.lower()), subject)

    @classmethod
    def from_framework(cls, framework):
        return cls(_build_grade(raw_grade) for raw_grade in framework)

    def grades(self):
        return [g.name for g in self._ordered]

    def grade(self, name):
        return self._grades.get((name or '').strip().lower())

    def subjects_offered(self, grade):
        """Subjects declared for term 1 of a grade; [] for an unknown grade."""
        found = self.grade(grade)
        if found is None or not found.terms:
            return []
        return [s.name for s in found.terms[0].subjects]

    def lookup(self, grade, subject, term) -> Optional[Subject]:
        """Subject definition for grade/subject/term, or None when the catalog has no match."""
        try:
            term = int(term)
        except (TypeError, ValueError):
            return None
        key = ((grade or '').strip().lower(), term, (subject or '').strip().lower())
        return self._subjects.get(key)


catalog = CurriculumCatalog.from_framework(curriculum_data.FRAMEWORK)


def subjects_offered(grade):
    return catalog.subjects_offered(grade)


def lookup(grade, subject, term):
    return catalog.lookup(grade, subject, term)
