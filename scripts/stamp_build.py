"""Stamp build metadata into ``src/tempconv/_build.py`` before packaging.

Usage::

    python scripts/stamp_build.py            # profile "release"
    python scripts/stamp_build.py debug
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

BUILD_MODULE = Path(__file__).resolve().parent.parent / "src" / "tempconv" / "_build.py"


def render(timestamp: str, profile: str) -> str:
    return (
        '"""Build metadata, rewritten by ``scripts/stamp_build.py`` when packaging."""\n'
        "\n"
        f'BUILD_TIMESTAMP = "{timestamp}"\n'
        f'BUILD_PROFILE = "{profile}"\n'
    )


def main(argv: list[str]) -> int:
    profile = argv[0] if argv else "release"
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    BUILD_MODULE.write_text(render(timestamp, profile), encoding="utf-8")
    print(f"Stamped {BUILD_MODULE.name} at {timestamp} ({profile})")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
