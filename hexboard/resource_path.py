from __future__ import annotations

import sys
from pathlib import Path


def asset_path(rel: str) -> Path:
    # frozen builds unpack package data next to the executable
    base = Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent))
    return base / "assets" / rel
