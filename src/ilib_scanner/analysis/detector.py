"""
Reference Detection.

Detection is deliberately naive: a member counts as referenced if its name
occurs anywhere in the file text. There is no tokenization, so matches inside
comments, string literals or longer identifiers all count. Including a class
that is not needed only costs bundle size; missing one breaks the app.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple

# What a JavaScript programmer writes to construct "now"
DATE_CONSTRUCTION_TOKEN = "new Date"

# Included whenever date construction is seen, so DateFactory can produce the
# calendar date for any locale.
ALWAYS_INCLUDE_DATE_SET: Tuple[str, ...] = ("DateFactory", "GregorianDate", "JulianDate")


@dataclass(frozen=True)
class FileFindings:
  """
  What one file contributes to the detected set.

  Attributes:
      members: Catalog members whose name occurs in the file.
      uses_dates: True if the file constructs a JavaScript Date.
  """

  members: FrozenSet[str] = frozenset()
  uses_dates: bool = False


class ReferenceDetector:
  """
  Tests file text against a fixed catalog of member names.
  """

  def __init__(self, catalog: Iterable[str], date_token: str = DATE_CONSTRUCTION_TOKEN):
    self.catalog: Tuple[str, ...] = tuple(catalog)
    self.date_token = date_token

  def detect(self, text: str) -> FileFindings:
    """
    Finds every catalog member referenced in the text.

    Args:
        text: Full contents of one source file.

    Returns:
        FileFindings: The matched members and the date usage flag.
    """
    members = frozenset(name for name in self.catalog if name in text)
    return FileFindings(members=members, uses_dates=self.date_token in text)
