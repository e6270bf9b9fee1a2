"""App entrypoint.

- workspace file editor (syntax mode per extension, edits go straight to the store)
- notebook cards with a validated create form
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cellbook.core.languages import CodeLanguage
from cellbook.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="cellbook", description="Workspace code editor and notebook launcher")
    p.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Folder to browse and edit (defaults to the last one used)",
    )
    p.add_argument("--theme", choices=("dark", "light"), default=None)
    p.add_argument(
        "--language",
        choices=[lang.value for lang in CodeLanguage],
        default=None,
        help="Default language for new notebooks",
    )
    p.add_argument("--log-level", default="INFO", help="Console log level")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO))
    install_global_exception_hooks()

    from PySide6.QtWidgets import QApplication

    from cellbook.ui.main_window import CellbookWindow

    if args.workspace is not None:
        args.workspace.mkdir(parents=True, exist_ok=True)

    app = QApplication([])
    win = CellbookWindow(workspace=args.workspace, theme=args.theme, default_language=args.language)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
