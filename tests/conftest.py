from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared settings fixtures used across the unit tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from proptree import PropertyTree  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def settings_dict() -> Dict[str, Any]:
    """
    Return a nested settings structure covering every value kind.

    Returns:
        Dict[str, Any]: Plain Python settings.
    """
    return {
        "app": {
            "name": "gateway",
            "debug": False,
            "workers": 4,
            "ratio": 0.75,
            "max_upload": 8_589_934_592,
        },
        "server": {
            "http": {"host": "0.0.0.0", "port": 8080},
            "tls": None,
        },
        "services": ["web", {"name": "db", "port": 5432}, ["a", "b"]],
        "timeout": 30,
        "tags": [],
        "limits": {},
    }


@pytest.fixture
def settings_tree(settings_dict: Dict[str, Any]) -> PropertyTree:
    """Provide a PropertyTree built from settings_dict."""
    return PropertyTree(settings_dict)
