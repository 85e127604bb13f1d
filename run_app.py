"""Local runner for the heart rate monitor client with src/ layout.

Usage: uv run python run_app.py [--url URL] [--device N]
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    # Ensure src/ is on sys.path so `import hrmonitor` resolves
    root = Path(__file__).resolve().parent
    src = root / "src"
    if src.exists():
        sys.path.insert(0, str(src))
    from hrmonitor.app import main as app_main  # type: ignore

    app_main()


if __name__ == "__main__":
    main()
