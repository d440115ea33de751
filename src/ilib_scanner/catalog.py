"""
Catalog Loading.

The catalog is the authoritative, ordered list of member (class) names that
ilib exposes. ilib ships it as `lib/ilib-unpack.js`, a module whose main data
is a JavaScript array of quoted class names. A plain JSON array of strings is
accepted too, which is handy for pinned or hand-curated catalogs.

The catalog is loaded once per `CatalogLoader`, before any file is scanned, so
a missing or malformed catalog aborts the run before any output is written.
"""

import json
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

DEFAULT_LIBRARY_NAME = "ilib"
DEFAULT_CLASS_PATH = "lib/ilib-unpack.js"

_ARRAY_LITERAL = re.compile(r"\[([^\[\]]*)\]", re.DOTALL)
_QUOTED_NAME = re.compile(r"""(["'])([A-Za-z_$][\w$]*)\1""")
_LINE_COMMENT = re.compile(r"^\s*//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_SEPARATORS = re.compile(r"[\s,]+")


class CatalogLoadError(RuntimeError):
  """Raised when the member catalog cannot be located or understood."""


def resolve_library_root(explicit: Optional[Union[str, Path]] = None, search_path: Optional[Path] = None) -> Optional[Path]:
  """
  Locates the root directory of the ilib package.

  Args:
      explicit: A user supplied root (e.g. from `--ilibRoot`). Always wins.
      search_path: Directory to start the `node_modules/ilib` lookup from.
          Defaults to the current working directory.

  Returns:
      Optional[Path]: The library root, or None if it could not be found.
  """
  if explicit:
    return Path(explicit)

  current = (search_path or Path.cwd()).resolve()
  for parent in [current, *current.parents]:
    candidate = parent / "node_modules" / DEFAULT_LIBRARY_NAME
    if candidate.is_dir():
      return candidate
  return None


def parse_catalog_text(text: str, json_format: bool = False) -> List[str]:
  """
  Extracts member names from catalog file contents.

  For JavaScript sources the largest array literal made entirely of quoted
  identifiers is taken as the member list.

  Args:
      text: The catalog file contents.
      json_format: Treat the text as a JSON array of strings.

  Returns:
      List[str]: Member names in catalog order, duplicates dropped.

  Raises:
      CatalogLoadError: If no member list can be found.
  """
  if json_format:
    try:
      data = json.loads(text)
    except json.JSONDecodeError as e:
      raise CatalogLoadError(f"Catalog is not valid JSON: {e}") from e
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
      raise CatalogLoadError("JSON catalog must be an array of strings")
    names = [item for item in data if item]
  else:
    stripped = _LINE_COMMENT.sub("", _BLOCK_COMMENT.sub("", text))
    names = []
    for match in _ARRAY_LITERAL.finditer(stripped):
      body = match.group(1)
      found = [m.group(2) for m in _QUOTED_NAME.finditer(body)]
      # Every element must be a quoted name, otherwise this is not the list
      remainder = _SEPARATORS.sub("", _QUOTED_NAME.sub("", body))
      if found and not remainder and len(found) > len(names):
        names = found

  if not names:
    raise CatalogLoadError("Catalog does not contain any member names")

  return list(dict.fromkeys(names))


class CatalogLoader:
  """
  Supplies the ordered list of known member names.

  Attributes:
      library_root (Optional[Path]): Root of the ilib package.
      class_path (str): Catalog location relative to the library root.
  """

  def __init__(self, library_root: Optional[Path], class_path: Optional[str] = None):
    self.library_root = library_root
    self.class_path = class_path or DEFAULT_CLASS_PATH
    self._members: Optional[Tuple[str, ...]] = None

  @property
  def path(self) -> Path:
    """
    The catalog file location.

    Raises:
        CatalogLoadError: If there is no library root to resolve against.
    """
    if self.library_root is None:
      raise CatalogLoadError(
        f"Cannot find the {DEFAULT_LIBRARY_NAME} package. Install it in node_modules or pass --ilibRoot."
      )
    return self.library_root / self.class_path

  def load(self) -> Tuple[str, ...]:
    """
    Loads the catalog, reading the file only on the first call.

    Returns:
        Tuple[str, ...]: Member names in catalog order.

    Raises:
        CatalogLoadError: If the file is missing, unreadable, or malformed.
    """
    if self._members is not None:
      return self._members

    path = self.path
    try:
      text = path.read_text(encoding="utf-8")
    except OSError as e:
      raise CatalogLoadError(f"Could not read catalog {path}: {e}") from e

    try:
      names = parse_catalog_text(text, json_format=path.suffix == ".json")
    except CatalogLoadError as e:
      raise CatalogLoadError(f"{path}: {e}") from e

    self._members = tuple(names)
    return self._members
