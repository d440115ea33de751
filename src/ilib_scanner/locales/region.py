"""
Locale Tag Parsing.

A small BCP-47 style parser that follows the segment classification rules of
`ilib-locale`: each segment separated by `-` or `_` is classified by its shape
rather than its position. Classification is case-sensitive and nothing is
re-cased, so "th-th" has no region. Only the region is consumed by the
scanner, but the other subtags are kept so callers can inspect what was
understood.

The parser is total: malformed input never raises, it simply yields empty
fields.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

_SEPARATORS = re.compile(r"[-_]")
_LANGUAGE = re.compile(r"^[a-z]{2,3}$")
_SCRIPT = re.compile(r"^[A-Z][a-z]{3}$")
_REGION = re.compile(r"^(?:[A-Z]{2}|[0-9]{3})$")


class LocaleTag(BaseModel):
  """
  The parsed components of a locale specifier.
  """

  spec: str = Field("", description="The original tag text.")
  language: str = Field("", description="ISO 639 language code (lower case).")
  script: str = Field("", description="ISO 15924 script code (title case).")
  region: str = Field("", description="ISO 3166 region code or UN M.49 number.")
  variant: str = Field("", description="Any trailing segment that is none of the above.")


def parse_locale(tag: Optional[str]) -> LocaleTag:
  """
  Splits a locale tag into its subtags.

  Two or three lower-case letters are a language, two upper-case letters or
  three digits are a region, an upper-case letter followed by three
  lower-case letters is a script, and anything else is a variant. Repeated
  subtags of the same kind keep the first occurrence.

  Args:
      tag: A tag such as "zh-Hant-TW", "en_US" or "th-TH".

  Returns:
      LocaleTag: The parsed components. Empty for None or garbage input.
  """
  if not isinstance(tag, str):
    return LocaleTag()

  text = tag.strip()
  parts = {"language": "", "script": "", "region": "", "variant": ""}

  for segment in (s for s in _SEPARATORS.split(text) if s):
    if _LANGUAGE.match(segment):
      kind = "language"
    elif _REGION.match(segment):
      kind = "region"
    elif _SCRIPT.match(segment):
      kind = "script"
    else:
      kind = "variant"
    parts[kind] = parts[kind] or segment

  return LocaleTag(spec=text, **parts)


def get_region(tag: Optional[str]) -> str:
  """
  Extracts the region subtag of a locale tag.

  Args:
      tag: The locale tag.

  Returns:
      str: The region (e.g. "TH"), or "" if the tag has none or is unparseable.
  """
  return parse_locale(tag).region
