"""
Analysis Subpackage.

Modules:
    - ``detector``: Substring matching of file text against the member catalog.
    - ``walker``: Depth-first traversal with dependency and library exclusions.
    - ``session``: Per-run accumulation of detected members.
"""
