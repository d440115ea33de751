"""
Scan Command Handler.

Orchestrates one scanner run:
1. Catalog loading (fatal on failure, before anything is scanned or written).
2. Locale calendar inference and tree scanning.
3. Writing the manifest and webpack config.
"""

from pathlib import Path

from ilib_scanner.analysis.session import ScanSession
from ilib_scanner.analysis.walker import ExclusionRules
from ilib_scanner.catalog import CatalogLoader, CatalogLoadError, resolve_library_root
from ilib_scanner.config import ScanConfig
from ilib_scanner.emitters import OutputWriteError, write_artifacts
from ilib_scanner.utils.console import console, log_error, log_info


def handle_scan(config: ScanConfig) -> int:
  """
  Handles the scanner command.

  Args:
      config: The fully resolved run configuration.

  Returns:
      int: Exit code (0 for success, 1 for a fatal error).
  """
  library_root = resolve_library_root(config.resolved_ilib_root)
  loader = CatalogLoader(library_root, config.class_path)

  try:
    catalog = loader.load()
  except CatalogLoadError as e:
    log_error(f"Error: {e}")
    return 1

  log_info(f"Loaded {len(catalog)} ilib classes from {loader.path}")

  session = ScanSession(
    catalog,
    locales=config.locales,
    rules=ExclusionRules(skip_dir_names=frozenset(config.exclude_dirs)),
    encoding=config.encoding,
    always_include_dates=config.always_include_dates,
  )
  result = session.scan([Path(p) for p in config.inputs])

  try:
    manifest_path, config_path = write_artifacts(result, config)
  except OutputWriteError as e:
    log_error(f"Error: {e}")
    return 1

  console.print(f"Done. Output is in {manifest_path} and {config_path}", markup=False, highlight=False)
  return 0
