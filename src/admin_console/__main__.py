"""Module entrypoint for `python -m admin_console`."""

from __future__ import annotations

import sys

from . import launcher as _launcher

if __name__ == "__main__":  # pragma: no cover - runtime delegation
    sys.exit(_launcher.main())
