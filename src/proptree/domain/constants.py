from __future__ import annotations

"""
Domain Constants.

Centralizes the path grammar and the integer limits shared by the value
node model and the property tree.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# PATH GRAMMAR
# -----------------------------------------------------------------------------
DELIMITER_CHAR = "."

# Key used to wrap scalar entries during array/object projection
NAME_KEY = "name"

# -----------------------------------------------------------------------------
# NUMERIC LIMITS
# -----------------------------------------------------------------------------
INT32_RANGE: Tuple[int, int] = (-(2 ** 31), 2 ** 31 - 1)
INT64_RANGE: Tuple[int, int] = (-(2 ** 63), 2 ** 63 - 1)
