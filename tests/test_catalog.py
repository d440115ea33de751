"""
Tests for Catalog Loading.

Verifies that:
1.  The class list is extracted from `ilib-unpack.js` style modules and JSON.
2.  The library root is found in node_modules or taken from the override.
3.  Missing or malformed catalogs raise `CatalogLoadError`.
4.  The catalog is read only once per loader.
"""

from unittest.mock import patch

import pytest

from ilib_scanner.catalog import (
  DEFAULT_CLASS_PATH,
  CatalogLoader,
  CatalogLoadError,
  parse_catalog_text,
  resolve_library_root,
)
from conftest import SAMPLE_CATALOG


def test_parse_js_array_literal():
  text = """
// the list of classes
var ilib = require("./ilib.js");
var names = ["DateFmt", 'NumFmt',
    "LocaleMatcher",
];
module.exports = names;
"""
  assert parse_catalog_text(text) == ["DateFmt", "NumFmt", "LocaleMatcher"]


def test_parse_picks_the_class_list_over_other_arrays():
  """
  Scenario: The module has several arrays, only one is a pure name list.
  Expectation: Mixed or shorter arrays are ignored.
  """
  text = """
var mixed = ["A", "B", "C", 1, foo];
var small = ["X"];
var classes = ["DateFmt", "NumFmt"];
"""
  assert parse_catalog_text(text) == ["DateFmt", "NumFmt"]


def test_parse_ignores_commented_arrays():
  text = """
/* ["Old1", "Old2", "Old3"] */
// ["Old4", "Old5", "Old6"]
module.exports = ["DateFmt"];
"""
  assert parse_catalog_text(text) == ["DateFmt"]


def test_parse_drops_duplicates_keeping_order():
  assert parse_catalog_text('["B", "A", "B"]') == ["B", "A"]


def test_parse_json():
  assert parse_catalog_text('["DateFmt", "NumFmt", ""]', json_format=True) == ["DateFmt", "NumFmt"]


@pytest.mark.parametrize(
  "text, json_format",
  [
    ("module.exports = {};", False),
    ("", False),
    ("{not json", True),
    ('{"classes": ["A"]}', True),
    ("[1, 2]", True),
    ("[]", True),
  ],
)
def test_parse_rejects_malformed(text, json_format):
  with pytest.raises(CatalogLoadError):
    parse_catalog_text(text, json_format=json_format)


def test_loader_reads_unpack_module(ilib_package):
  loader = CatalogLoader(ilib_package)

  assert loader.path == ilib_package / DEFAULT_CLASS_PATH
  assert list(loader.load()) == SAMPLE_CATALOG


def test_loader_memoizes(ilib_package):
  loader = CatalogLoader(ilib_package)
  first = loader.load()

  with patch("pathlib.Path.read_text", side_effect=AssertionError("re-read")):
    assert loader.load() is first


def test_loader_custom_class_path(ilib_package):
  (ilib_package / "classes.json").write_text('["NumFmt"]', encoding="utf-8")

  assert CatalogLoader(ilib_package, "classes.json").load() == ("NumFmt",)


def test_loader_missing_file(tmp_path):
  with pytest.raises(CatalogLoadError, match="Could not read catalog"):
    CatalogLoader(tmp_path).load()


def test_loader_without_root():
  with pytest.raises(CatalogLoadError, match="--ilibRoot"):
    CatalogLoader(None).load()


def test_loader_malformed_file(tmp_path):
  target = tmp_path / "lib" / "ilib-unpack.js"
  target.parent.mkdir()
  target.write_text("module.exports = null;", encoding="utf-8")

  with pytest.raises(CatalogLoadError, match="ilib-unpack.js"):
    CatalogLoader(tmp_path).load()


def test_resolve_root_from_node_modules(ilib_package, tmp_path):
  nested = tmp_path / "app" / "src"
  nested.mkdir(parents=True)

  assert resolve_library_root(search_path=nested) == ilib_package.resolve()


def test_resolve_root_explicit_wins(ilib_package, tmp_path):
  assert resolve_library_root("vendor/ilib", search_path=tmp_path).as_posix() == "vendor/ilib"


def test_resolve_root_not_found(tmp_path):
  # Assumes no node_modules/ilib in the ancestors of the pytest temp dir
  assert resolve_library_root(search_path=tmp_path) is None
