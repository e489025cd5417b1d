"""Launcher for `python -m admin_console` and the `admin-console` script."""

from __future__ import annotations

import sys

from admin_console.app.bootstrap import create_app, shutdown_app
from admin_console.config import settings


def main() -> int:  # pragma: no cover - runtime
    ctx = create_app(headless=False, data_dir=settings.DATA_DIR, install_excepthook=True)
    if ctx.qt_app is None:
        print("PyQt6 is required to run the admin console.", file=sys.stderr)  # noqa: T201
        return 1
    from admin_console.main_window import MainWindow

    win = MainWindow(ctx.store, config=ctx.config, bus=ctx.bus)
    if ctx.config.maximized:
        win.showMaximized()
    else:
        win.show()
    try:
        return ctx.qt_app.exec()
    finally:
        shutdown_app(ctx)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
