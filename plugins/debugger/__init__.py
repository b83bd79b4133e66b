# plugins/debugger/__init__.py
from __future__ import annotations

"""
Sample debugger command group:
- program counter stepping and status
- trace toggle with argument completion
- one-shot UDP send / receive helpers
"""

CATEGORY_DESCRIPTION = (
    "Toy debugger state plus UDP send/wait helpers."
)
