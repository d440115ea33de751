"""
Tests for the programmatic API (`ilib_scanner.scan`).
"""

import ilib_scanner


def test_scan_convenience(make_tree, tmp_path):
  make_tree(tmp_path, {"a.js": "new NumFmt(); new Date();", "node_modules/x.js": "AddressFmt"})

  result = ilib_scanner.scan([tmp_path], catalog=["NumFmt", "AddressFmt"], locales=["th-TH"])

  assert result.members == ["DateFactory", "GregorianDate", "JulianDate", "NumFmt", "ThaiSolarDate"]
  assert result.files_scanned == 1


def test_version():
  assert ilib_scanner.__version__
