"""
Scan Session.

A `ScanSession` owns everything one scanner run needs: the catalog, the
calendar classes inferred from the configured locales, and the set of detected
members. Nothing is kept in module state, so independent sessions can run side
by side (e.g. in tests).

Each file is mapped to a `FileFindings` by the `ReferenceDetector` and folded
into the session by set union, so the result never depends on the order in
which files are visited.
"""

from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Set

from pydantic import BaseModel, Field

from ilib_scanner.analysis.detector import ALWAYS_INCLUDE_DATE_SET, FileFindings, ReferenceDetector
from ilib_scanner.analysis.walker import ExclusionRules, TreeWalker, read_source, warn_inaccessible
from ilib_scanner.locales.calendars import expand
from ilib_scanner.utils.console import log_info


class ScanResult(BaseModel):
  """
  The frozen outcome of a scan, consumed by the artifact emitters.
  """

  members: List[str] = Field(default_factory=list, description="Detected members, sorted.")
  files_scanned: int = Field(0, description="Number of files whose text was searched.")
  date_usage_found: bool = Field(False, description="True if any file constructs a Date.")
  inferred_calendars: List[str] = Field(default_factory=list, description="Calendar classes inferred from locales.")
  errors: List[str] = Field(default_factory=list, description="Paths that could not be accessed.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0


class ScanSession:
  """
  Accumulates detected members across the files of one run.

  Attributes:
      detector (ReferenceDetector): Matches file text against the catalog.
      inferred_calendars (FrozenSet[str]): Calendar classes for the locales.
      rules (ExclusionRules): Paths the walker skips.
      encoding (str): Encoding used to read source files.
      always_include_dates (bool): Include the date classes as soon as any
          file is scanned, whether or not it constructs a Date.
  """

  def __init__(
    self,
    catalog: Iterable[str],
    locales: Iterable[str] = (),
    rules: Optional[ExclusionRules] = None,
    encoding: str = "utf-8",
    always_include_dates: bool = False,
  ):
    self.detector = ReferenceDetector(catalog)
    self.inferred_calendars: FrozenSet[str] = frozenset(expand(locales))
    self.rules = rules or ExclusionRules()
    self.encoding = encoding
    self.always_include_dates = always_include_dates

    self._detected: Set[str] = set()
    self._files_scanned = 0
    self._date_usage = False
    self._errors: List[str] = []

  @property
  def detected(self) -> FrozenSet[str]:
    """Members detected so far, including date and calendar inferences."""
    return frozenset(self._detected)

  def add_findings(self, findings: FileFindings) -> None:
    """
    Merges one file's findings into the session.

    Args:
        findings: The output of `ReferenceDetector.detect`.
    """
    self._files_scanned += 1
    self._detected.update(findings.members)

    if findings.uses_dates:
      self._date_usage = True

    if findings.uses_dates or self.always_include_dates:
      self._detected.update(ALWAYS_INCLUDE_DATE_SET)
      self._detected.update(self.inferred_calendars)

  def scan_text(self, text: str) -> FileFindings:
    """
    Detects references in one file's text and records them.

    Args:
        text: File contents.

    Returns:
        FileFindings: What the text contributed.
    """
    findings = self.detector.detect(text)
    self.add_findings(findings)
    return findings

  def _on_error(self, path: Path, exc: OSError) -> None:
    self._errors.append(str(path))
    warn_inaccessible(path, exc)

  def scan(self, roots: Iterable[Path]) -> ScanResult:
    """
    Walks the roots and searches every eligible file.

    Inaccessible paths are logged and skipped.

    Args:
        roots: Files or directories to scan.

    Returns:
        ScanResult: The accumulated result.
    """
    walker = TreeWalker(self.rules, on_error=self._on_error)
    for path in walker.walk(roots):
      try:
        text = read_source(path, self.encoding)
      except OSError as e:
        self._on_error(path, e)
        continue
      self.scan_text(text)

    log_info(f"Scanned {self._files_scanned} files, found {len(self._detected)} ilib classes.")
    return self.result()

  def result(self) -> ScanResult:
    return ScanResult(
      members=sorted(self._detected),
      files_scanned=self._files_scanned,
      date_usage_found=self._date_usage,
      inferred_calendars=sorted(self.inferred_calendars),
      errors=list(self._errors),
    )
