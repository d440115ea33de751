"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and entry point.
    - ``handlers/scan``: The scan-and-generate command.
"""
