"""
ilib-scanner Package.

Scans a web site for references to ilib classes and generates a manifest
module plus a webpack configuration, so the site can ship a minimal ilib
containing only what it uses.

Usage
-----

.. code-block:: python

    import ilib_scanner

    result = ilib_scanner.scan(["src"], catalog=["DateFmt", "NumFmt"], locales=["th-TH"])
    print(result.members)
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from ilib_scanner.analysis.session import ScanResult, ScanSession
from ilib_scanner.analysis.walker import ExclusionRules
from ilib_scanner.config import DEFAULT_LOCALES, ScanConfig

__version__ = "1.0.0"


def scan(
  inputs: Iterable[Union[str, Path]],
  catalog: Iterable[str],
  locales: Iterable[str] = DEFAULT_LOCALES,
  rules: Optional[ExclusionRules] = None,
  always_include_dates: bool = False,
) -> ScanResult:
  """
  Scans files and directories for references to catalog members.

  Args:
      inputs: Files or directories to scan.
      catalog: Known member names.
      locales: Locales used to infer calendar classes.
      rules: Exclusion rules. Defaults to skipping node_modules and ilib files.
      always_include_dates: Include the date classes even without Date usage.

  Returns:
      ScanResult: The detected members and scan statistics.
  """
  session = ScanSession(catalog, locales=locales, rules=rules, always_include_dates=always_include_dates)
  return session.scan([Path(p) for p in inputs])


__all__ = [
  "DEFAULT_LOCALES",
  "ExclusionRules",
  "ScanConfig",
  "ScanResult",
  "ScanSession",
  "scan",
  "__version__",
]
