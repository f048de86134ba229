"""Initialize the production secrets env file next to this repository's .prod.env."""
from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
os.environ.setdefault("PRODENV_ROOT_DIR", str(ROOT))
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from prodenv.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
