"""DragStage launcher.

Runs preflight checks before importing GTK-related modules, which gives
clearer error messages on systems missing GTK 4 or a display.
"""

from __future__ import annotations


def main() -> int:
    from dragstage.preflight import run_preflight_or_die

    run_preflight_or_die(require_display=True, check_deps=True)

    from dragstage.app import main as app_main

    return int(app_main())


if __name__ == "__main__":
    raise SystemExit(main())
