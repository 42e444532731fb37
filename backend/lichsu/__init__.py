"""
LICHSU - Vietnamese history content backend

Serves the admin area of a Vietnamese history education site:
historical periods, events, figures and sites.

Subsystems:
- Ordering: drag-and-drop display order for every admin list
- Integrity: safe period deletion (scan, guard, reassign, purge)
"""

__version__ = "0.1.0"
