from __future__ import annotations

import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent

root_path = str(ROOT_DIR)
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def _ensure_test_env() -> None:
    # Host-level overrides must not leak into the suite.
    for key in list(os.environ):
        if key.upper().startswith("SIMPLE_LOC_"):
            os.environ.pop(key)
    # Settings skip the .env file inside containers.
    os.environ.setdefault("DOCKER_CONTAINER", "true")


_ensure_test_env()
