"""
Source Tree Traversal.

Walks input files and directories depth-first, in directory listing order,
yielding every regular file that should be searched for references. Two kinds
of path are never scanned:

1.  Dependency directories (`node_modules` by default) are not descended into.
2.  Files whose path starts with the library name (`ilib` by default), so a
    copy of ilib vendored next to the app does not mark every class as used.

A path that cannot be accessed is reported and skipped; it never aborts the
walk of its siblings or of the remaining roots.
"""

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from ilib_scanner.catalog import DEFAULT_LIBRARY_NAME
from ilib_scanner.utils.console import log_warning

DEFAULT_SKIP_DIRS: FrozenSet[str] = frozenset({"node_modules"})

ErrorCallback = Callable[[Path, OSError], None]


def warn_inaccessible(path: Path, exc: OSError) -> None:
  """Default error callback: one line naming the path."""
  log_warning(f"Error: could not access {path}")


@dataclass(frozen=True)
class ExclusionRules:
  """
  Predicates deciding which paths the walker ignores.

  Attributes:
      skip_dir_names: Directory names that are never descended into.
      skip_file_prefix: Files whose path (as walked, relative to the working
          directory when the roots are relative) starts with this text are
          not read. Case-sensitive. Empty disables the check.
  """

  skip_dir_names: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SKIP_DIRS)
  skip_file_prefix: str = DEFAULT_LIBRARY_NAME

  def skips_directory(self, path: Path) -> bool:
    return path.name in self.skip_dir_names

  def skips_file(self, path: Path) -> bool:
    return bool(self.skip_file_prefix) and path.as_posix().startswith(self.skip_file_prefix)


class TreeWalker:
  """
  Depth-first file enumerator with exclusion rules.

  Attributes:
      rules (ExclusionRules): Which directories and files to skip.
      errors (List[Path]): Paths that could not be accessed during the last walk.
  """

  def __init__(self, rules: Optional[ExclusionRules] = None, on_error: Optional[ErrorCallback] = None):
    self.rules = rules or ExclusionRules()
    self.on_error = on_error or warn_inaccessible
    self.errors: List[Path] = []
    self._visited: Set[Tuple[int, int]] = set()

  def walk(self, roots: Iterable[Path]) -> Iterator[Path]:
    """
    Yields the files to scan under each root.

    Args:
        roots: Files or directories to walk.

    Yields:
        Path: Each regular file that passes the exclusion rules.
    """
    self.errors = []
    self._visited = set()
    for root in roots:
      yield from self._walk_path(Path(root))

  def _report(self, path: Path, exc: OSError) -> None:
    self.errors.append(path)
    self.on_error(path, exc)

  def _walk_path(self, path: Path) -> Iterator[Path]:
    try:
      # Follows symlinks, so a dangling link lands in the except clause
      st = path.stat()
    except OSError as e:
      self._report(path, e)
      return

    if stat.S_ISDIR(st.st_mode):
      # Symlinked directories can form cycles
      key = (st.st_dev, st.st_ino)
      if key in self._visited:
        return
      self._visited.add(key)

      try:
        children = os.listdir(path)
      except OSError as e:
        self._report(path, e)
        return

      for name in children:
        child = path / name
        if self.rules.skips_directory(child):
          continue
        yield from self._walk_path(child)

    elif stat.S_ISREG(st.st_mode):
      if not self.rules.skips_file(path):
        yield path


def read_source(path: Path, encoding: str = "utf-8") -> str:
  """
  Reads the full text of a file.

  Undecodable bytes are replaced rather than raising, so binary assets in the
  tree are searched harmlessly.

  Args:
      path: The file to read.
      encoding: Text encoding of the sources.

  Returns:
      str: The file contents.

  Raises:
      OSError: If the file cannot be read.
  """
  with open(path, "r", encoding=encoding, errors="replace") as f:
    return f.read()
