"""
Calendar Inference.

Apps that construct dates for a region with a non-Gregorian calendar tradition
need that calendar's date class in the bundle even when the code never names
it directly (`DateFactory` picks it at runtime from the locale). This module
holds the static region -> calendar table and expands a locale list into the
set of calendar date classes to add.
"""

from typing import Dict, Iterable, Set, Tuple

from ilib_scanner.locales.region import get_region

_ISLAMIC = ("IslamicDate",)
_PERSIAN = ("IslamicDate", "PersianDate", "PersianAlgoDate")
_HAN = ("HanDate",)

CALENDAR_INFERENCE_TABLE: Dict[str, Tuple[str, ...]] = {
  "ET": ("EthiopicDate",),
  "TR": _ISLAMIC,
  "SA": _ISLAMIC,
  "MA": _ISLAMIC,
  "DZ": _ISLAMIC,
  "DJ": _ISLAMIC,
  "ER": _ISLAMIC,
  "TN": _ISLAMIC,
  "LY": _ISLAMIC,
  "SD": _ISLAMIC,
  "JO": _ISLAMIC,
  "LB": _ISLAMIC,
  "MR": _ISLAMIC,
  "SY": _ISLAMIC,
  "IQ": _ISLAMIC,
  "YE": _ISLAMIC,
  "AE": _ISLAMIC,
  "OM": _ISLAMIC,
  "QA": _ISLAMIC,
  "BH": _ISLAMIC,
  "KM": _ISLAMIC,
  "KW": _ISLAMIC,
  "PS": _ISLAMIC,
  "PK": _ISLAMIC,
  "TD": _ISLAMIC,
  "TM": _ISLAMIC,
  "KG": _ISLAMIC,
  "BD": _ISLAMIC,
  "EG": ("IslamicDate", "CopticDate"),
  "IR": _PERSIAN,
  "AF": _PERSIAN,
  "IL": ("HebrewDate", "IslamicDate"),
  "TH": ("ThaiSolarDate",),
  "CN": _HAN,
  "CX": _HAN,
  "TW": _HAN,
  "HK": _HAN,
  "MO": _HAN,
  "SG": _HAN,
}


def calendars_for_region(region: str) -> Tuple[str, ...]:
  """
  Looks up the calendar date classes used in a region.

  Args:
      region: An upper-case region code (e.g. "EG").

  Returns:
      Tuple[str, ...]: The calendar classes, or an empty tuple if the region
      only uses the Gregorian calendar.
  """
  return CALENDAR_INFERENCE_TABLE.get(region, ())


def expand(locales: Iterable[str]) -> Set[str]:
  """
  Infers the calendar date classes needed by a list of locales.

  Unparseable tags and unmapped regions contribute nothing.

  Args:
      locales: Locale tags such as ["ja-JP", "th-TH"].

  Returns:
      Set[str]: The deduplicated calendar classes (e.g. {"ThaiSolarDate"}).
  """
  inferred: Set[str] = set()
  for tag in locales:
    inferred.update(calendars_for_region(get_region(tag)))
  return inferred
