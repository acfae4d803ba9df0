"""CLI package.

The ``cli`` sub-package contains the Click application used to try the
parser from a shell.  It parses and prints commands; it never executes
them.
"""
from __future__ import annotations
