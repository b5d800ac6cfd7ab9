"""Main DragStage application."""

import logging
import sys
from typing import Optional

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Gtk, Gio, GLib, Adw

from dragstage import __version__, __app_id__
from dragstage.canvas import StageCanvas
from dragstage.config import StageSettings, configure_logging, load_settings
from dragstage.demo import build_demo_keyboard, build_demo_scene
from dragstage.export import export_png

logger = logging.getLogger(__name__)


class DragStageWindow(Adw.ApplicationWindow):
    """Main application window."""

    def __init__(self, app: Adw.Application, settings: StageSettings):
        super().__init__(application=app)
        self.settings = settings

        # Window setup
        self.set_title("DragStage")
        self.set_default_size(settings.width, settings.height + 48)

        self.scene = build_demo_scene(settings)
        self.keyboard = build_demo_keyboard(settings)

        self._build_ui()
        self._setup_shortcuts()

    def _build_ui(self):
        """Build the main UI layout."""
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        main_box.append(self._build_header())

        self.canvas = StageCanvas(self.scene, self.settings, self.keyboard)

        # Wrap in toast overlay for in-app notifications
        self.toast_overlay = Adw.ToastOverlay()
        self.toast_overlay.set_child(self.canvas)
        main_box.append(self.toast_overlay)

        self.set_content(main_box)

    def _build_header(self) -> Adw.HeaderBar:
        """Build the header bar."""
        header = Adw.HeaderBar()

        menu_btn = Gtk.MenuButton()
        menu_btn.set_icon_name("open-menu-symbolic")
        menu_btn.set_tooltip_text("Menu")

        menu = Gio.Menu()
        menu.append("Export as PNG...", "win.export-png")
        menu.append("Reset Stage", "win.reset")
        menu.append("About DragStage", "win.show-about")

        popover = Gtk.PopoverMenu()
        popover.set_menu_model(menu)
        menu_btn.set_popover(popover)
        header.pack_start(menu_btn)

        return header

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        actions = [
            ("export-png", self._export_png, "<Control>e"),
            ("reset", self._reset_stage, "<Control>r"),
            ("show-about", self._show_about, None),
            ("quit", lambda: self.close(), "<Control>q"),
        ]

        for name, callback, accel in actions:
            action = Gio.SimpleAction.new(name, None)
            action.connect("activate", lambda a, p, cb=callback: cb())
            self.add_action(action)

            if accel:
                self.get_application().set_accels_for_action(f"win.{name}", [accel])

    def _reset_stage(self):
        """Put every box back where the demo started it."""
        self.canvas.controller.stop()
        self.scene = build_demo_scene(self.settings)
        self.canvas.scene = self.scene
        self.canvas.controller.scene = self.scene
        self.canvas.controller.start()
        self.canvas.queue_draw()

    def _show_about(self):
        """Show about dialog."""
        about = Adw.AboutWindow(
            transient_for=self,
            application_name="DragStage",
            application_icon="applications-graphics",
            developer_name="DragStage Project",
            version=__version__,
            license_type=Gtk.License.MIT_X11,
            comments="Drag rectangles around a 2D stage",
        )
        about.present()

    # ==================== Export ====================

    def _export_png(self):
        """Export the stage as PNG."""
        dialog = Gtk.FileDialog()
        dialog.set_title("Export as PNG")
        dialog.set_initial_name("stage.png")

        filter_png = Gtk.FileFilter()
        filter_png.set_name("PNG Images")
        filter_png.add_mime_type("image/png")

        filters = Gio.ListStore.new(Gtk.FileFilter)
        filters.append(filter_png)
        dialog.set_filters(filters)

        dialog.save(self, None, self._on_export_png_response)

    def _on_export_png_response(self, dialog, result):
        """Handle PNG export dialog response."""
        try:
            file = dialog.save_finish(result)
        except GLib.Error:
            return  # User cancelled

        filepath = file.get_path() if file else None
        if not filepath:
            self._show_toast("Export failed: selected location is not a local file")
            return

        export_png(self.scene, filepath, self.settings.width, self.settings.height,
                   keyboard=self.keyboard)
        logger.info("Exported stage to %s", filepath)
        self._show_toast(f"Exported to {filepath}")

    def _show_toast(self, message: str):
        """Show a toast notification."""
        toast = Adw.Toast(title=message)
        toast.set_timeout(3)
        self.toast_overlay.add_toast(toast)


class DragStageApp(Adw.Application):
    """Main application class."""

    def __init__(self, settings: Optional[StageSettings] = None):
        super().__init__(
            application_id=__app_id__,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS
        )
        self.settings = settings or load_settings()
        self.window: Optional[DragStageWindow] = None

    def do_startup(self):
        """Initialize application."""
        Adw.Application.do_startup(self)

        style_manager = Adw.StyleManager.get_default()
        style_manager.set_color_scheme(Adw.ColorScheme.FORCE_DARK)

    def do_activate(self):
        """Activate application."""
        if not self.window:
            self.window = DragStageWindow(self, self.settings)

        self.window.present()


def main() -> int:
    """Application entry point."""
    settings = load_settings()
    configure_logging(settings.log_level)
    app = DragStageApp(settings)
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
