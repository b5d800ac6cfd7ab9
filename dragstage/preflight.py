"""Environment and dependency preflight checks.

Set DRAGSTAGE_SKIP_PREFLIGHT=1 to bypass (useful for development).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class PreflightResult:
    ok: bool
    message: str


def _has_display(environ: Mapping[str, str]) -> bool:
    return bool(environ.get("WAYLAND_DISPLAY") or environ.get("DISPLAY"))


def _check_python_deps() -> Optional[str]:
    """Return an error message if required deps are missing."""
    try:
        import cairo  # type: ignore[import-not-found]  # noqa: F401
    except Exception as exc:  # pylint: disable=broad-except
        return (
            "Missing Python dependency 'pycairo'. "
            "Install it with pip (pycairo) and ensure cairo is available. "
            f"Underlying error: {exc}"
        )

    try:
        import gi  # type: ignore[import-not-found]

        gi.require_version("Gtk", "4.0")
        gi.require_version("Adw", "1")
        from gi.repository import Gtk, Adw  # type: ignore[import-not-found]  # noqa: F401
    except Exception as exc:  # pylint: disable=broad-except
        return (
            "Missing GTK 4/libadwaita bindings. Install PyGObject together with "
            "your distribution's gtk4 and libadwaita packages. "
            f"Underlying error: {exc}"
        )

    return None


def run_preflight(
    *,
    require_display: bool = True,
    check_deps: bool = True,
    environ: Optional[Mapping[str, str]] = None,
) -> PreflightResult:
    """Run checks and return a structured result."""
    environ = os.environ if environ is None else environ

    if environ.get("DRAGSTAGE_SKIP_PREFLIGHT") == "1":
        return PreflightResult(True, "Preflight skipped via DRAGSTAGE_SKIP_PREFLIGHT=1")

    if require_display and not _has_display(environ):
        return PreflightResult(
            False,
            "DragStage needs a graphical session but neither WAYLAND_DISPLAY nor "
            "DISPLAY is set. Set DRAGSTAGE_SKIP_PREFLIGHT=1 to bypass.",
        )

    if check_deps:
        dep_error = _check_python_deps()
        if dep_error:
            return PreflightResult(False, dep_error)

    return PreflightResult(True, "Preflight OK")


def run_preflight_or_die(
    *,
    require_display: bool = True,
    check_deps: bool = True,
) -> None:
    result = run_preflight(require_display=require_display, check_deps=check_deps)
    if result.ok:
        return

    sys.stderr.write("\nDragStage preflight check failed:\n")
    sys.stderr.write(result.message)
    sys.stderr.write("\n\n")
    raise SystemExit(1)
