"""
Locale handling: region extraction and calendar inference.
"""

from ilib_scanner.locales.calendars import CALENDAR_INFERENCE_TABLE, calendars_for_region, expand
from ilib_scanner.locales.region import LocaleTag, get_region, parse_locale

__all__ = [
  "CALENDAR_INFERENCE_TABLE",
  "LocaleTag",
  "calendars_for_region",
  "expand",
  "get_region",
  "parse_locale",
]
