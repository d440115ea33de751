"""
Tests for Reference Detection.

Detection is plain substring containment: case-sensitive, no word boundaries,
and blind to comments and string literals.
"""

import pytest

from ilib_scanner.analysis.detector import (
  ALWAYS_INCLUDE_DATE_SET,
  DATE_CONSTRUCTION_TOKEN,
  FileFindings,
  ReferenceDetector,
)


@pytest.fixture
def detector() -> ReferenceDetector:
  return ReferenceDetector(["DateFmt", "NumFmt", "LocaleMatcher", "Locale"])


def test_direct_reference(detector):
  findings = detector.detect("var fmt = DateFmt.create({length: 'short'});")
  assert findings.members == frozenset({"DateFmt"})
  assert findings.uses_dates is False


def test_substring_of_longer_identifier_counts(detector):
  """
  Scenario: 'Locale' only appears as part of 'LocaleMatcher'.
  Expectation: Both match (over-approximation is intended).
  """
  findings = detector.detect("var lm = new LocaleMatcher({locale: 'en'});")
  assert findings.members == frozenset({"LocaleMatcher", "Locale"})


def test_case_sensitive(detector):
  assert detector.detect("datefmt numfmt").members == frozenset()


def test_comments_and_strings_count(detector):
  code = "// uses NumFmt later\nvar s = 'DateFmt';"
  assert detector.detect(code).members == frozenset({"NumFmt", "DateFmt"})


def test_date_construction_token(detector):
  findings = detector.detect("var now = new Date();")
  assert findings.uses_dates is True
  assert findings.members == frozenset()


def test_date_token_requires_exact_text(detector):
  assert detector.detect("var now = Date.now();").uses_dates is False
  assert detector.detect("var now = new  Date();").uses_dates is False


def test_new_datefmt_contains_date_token(detector):
  """
  Scenario: 'new DateFmt' starts with the text 'new Date'.
  Expectation: Counts as date construction (plain substring match).
  """
  findings = detector.detect("var fmt = new DateFmt({length: 'short'});")
  assert findings.uses_dates is True
  assert findings.members == frozenset({"DateFmt"})


def test_empty_catalog():
  findings = ReferenceDetector([]).detect("DateFmt.create()")
  assert findings == FileFindings(members=frozenset(), uses_dates=False)


def test_constants():
  assert DATE_CONSTRUCTION_TOKEN == "new Date"
  assert set(ALWAYS_INCLUDE_DATE_SET) == {"DateFactory", "GregorianDate", "JulianDate"}
