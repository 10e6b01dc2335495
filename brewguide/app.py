"""Main application window for BrewGuide."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QFrame, QScrollArea,
    QMessageBox,
)

from .audio.sounds import SoundManager
from .power.wake_lock import WakeLock
from .settings import Settings, load_settings, save_settings
from .timer.engine import BrewTimer, BrewSnapshot, BrewState
from .timer.schedule import DEFAULT_PRESET, Preset
from .ui.preset_picker import PresetPicker
from .ui.step_list import StepListWidget
from .ui.styles import build_stylesheet
from .ui.timer_widget import BrewClockWidget

logger = logging.getLogger(__name__)


def _preset_from_settings(settings: Settings) -> Preset:
    try:
        return Preset(settings.default_preset)
    except ValueError:
        logger.warning("Unknown default preset %r, using %s",
                       settings.default_preset, DEFAULT_PRESET.label)
        return DEFAULT_PRESET


class BrewGuideApp(QMainWindow):
    """Main application window.

    Redraws itself from ``BrewTimer.snapshot_changed``; the only state it
    keeps of its own is layout and preferences.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        wake_lock: WakeLock | None = None,
        sound_manager: SoundManager | None = None,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle("BrewGuide")
        self.setMinimumSize(380, 600)

        # ── geometry save timer (before any resize/move) ──────────────
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self._persist_settings = persist_settings
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.window_x is not None and self._settings.window_y is not None:
            self.move(self._settings.window_x, self._settings.window_y)
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── engine ────────────────────────────────────────────────────
        self._engine = BrewTimer(
            self,
            preset=_preset_from_settings(self._settings),
            wake_lock=wake_lock,
            keep_awake=self._settings.keep_screen_awake,
        )

        # ── sound manager ─────────────────────────────────────────────
        self._sound_manager = (
            sound_manager if sound_manager is not None else SoundManager(parent=self)
        )
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.setCentralWidget(scroll)

        central = QWidget()
        scroll.setWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(16)

        header = QLabel("☕  BrewGuide", central)
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet("font-size: 22px; font-weight: 700;")
        root.addWidget(header)

        self._preset_picker = PresetPicker(self._engine.preset, central)
        root.addWidget(self._preset_picker)

        self._clock_widget = BrewClockWidget(self._engine, central)
        root.addWidget(self._clock_widget)

        self._step_list = StepListWidget(self._engine.steps, central)
        root.addWidget(self._step_list)

        self._complete_banner = self._build_complete_banner(central)
        root.addWidget(self._complete_banner)
        root.addStretch(1)

        # ── wiring ────────────────────────────────────────────────────
        self._preset_picker.preset_selected.connect(self._on_preset_selected)
        self._engine.preset_changed.connect(self._on_preset_changed)
        self._engine.step_changed.connect(self._on_step_changed)
        self._engine.brew_completed.connect(self._on_brew_completed)
        self._engine.snapshot_changed.connect(self._render)
        self._clock_widget.start_pause_button.clicked.connect(self._click)
        self._clock_widget.reset_button.clicked.connect(self._click)

        self._build_menu_bar()
        self._render(self._engine.snapshot())

    # ── build helpers ─────────────────────────────────────────────────────

    def _build_complete_banner(self, parent: QWidget) -> QFrame:
        banner = QFrame(parent)
        banner.setObjectName("completeBanner")
        layout = QVBoxLayout(banner)
        layout.setContentsMargins(20, 16, 20, 16)
        for text, css in (
            ("🎉", "font-size: 28px;"),
            ("Congratulations, your brew is ready!", "font-size: 18px; font-weight: 700;"),
            ("Enjoy your coffee.", "font-size: 14px;"),
        ):
            lbl = QLabel(text, banner)
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            lbl.setStyleSheet(css)
            layout.addWidget(lbl)
        banner.setVisible(False)
        return banner

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        # ── BrewGuide menu ───────────────────────────────────────────
        about_action = QAction("About BrewGuide", self)
        about_action.setMenuRole(QAction.MenuRole.AboutRole)
        about_action.triggered.connect(self._show_about)

        quit_action = QAction("Quit BrewGuide", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        app_menu = menu_bar.addMenu("BrewGuide")
        app_menu.addAction(about_action)
        app_menu.addAction(quit_action)

        # ── Options menu ─────────────────────────────────────────────
        options_menu = menu_bar.addMenu("Options")

        self._sound_action = QAction("Sound Cues", self)
        self._sound_action.setCheckable(True)
        self._sound_action.setChecked(self._settings.sound_enabled)
        self._sound_action.triggered.connect(self._toggle_sound)
        options_menu.addAction(self._sound_action)

        self._awake_action = QAction("Keep Screen Awake", self)
        self._awake_action.setCheckable(True)
        self._awake_action.setChecked(self._settings.keep_screen_awake)
        self._awake_action.triggered.connect(self._toggle_keep_awake)
        options_menu.addAction(self._awake_action)

        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        options_menu.addAction(self._aot_action)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About BrewGuide",
            "BrewGuide 0.1.0\n\nA step-by-step pour-over timer.\n"
            "Space: start / pause    Esc: reset",
        )

    # ── properties (tests) ────────────────────────────────────────────────

    @property
    def engine(self) -> BrewTimer:
        return self._engine

    @property
    def preset_picker(self) -> PresetPicker:
        return self._preset_picker

    @property
    def clock_widget(self) -> BrewClockWidget:
        return self._clock_widget

    @property
    def step_list(self) -> StepListWidget:
        return self._step_list

    @property
    def complete_banner(self) -> QFrame:
        return self._complete_banner

    # ── slots ─────────────────────────────────────────────────────────────

    def _render(self, snap: BrewSnapshot) -> None:
        self._preset_picker.setVisible(not snap.started)
        self._step_list.render_snapshot(snap)
        self._complete_banner.setVisible(snap.state == BrewState.COMPLETED)

    def _on_space(self) -> None:
        self._clock_widget.toggle()

    def _on_preset_selected(self, preset: Preset) -> None:
        self._engine.set_preset(preset)
        # Keep the toggle in sync if the engine refused the change
        self._preset_picker.set_current(self._engine.preset)

    def _on_preset_changed(self, preset: Preset) -> None:
        self._step_list.set_steps(self._engine.steps)
        self._settings.default_preset = preset.grams
        self._save_settings()

    def _on_step_changed(self, index: int) -> None:
        if self._engine.running and index > 0:
            self._sound_manager.play("step_change")

    def _on_brew_completed(self) -> None:
        self._sound_manager.play("brew_complete")

    def _click(self) -> None:
        self._sound_manager.play("click")

    # ── option toggles ───────────────────────────────────────────────────

    def _toggle_sound(self, checked: bool) -> None:
        self._settings.sound_enabled = checked
        self._sound_manager.set_enabled(checked)
        self._save_settings()

    def _toggle_keep_awake(self, checked: bool) -> None:
        self._settings.keep_screen_awake = checked
        self._engine.clock.keep_awake = checked
        self._save_settings()

    def _toggle_always_on_top(self, checked: bool) -> None:
        self._settings.always_on_top = checked
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, checked)
        if self.isVisible():
            self.show()  # flag changes hide the window
        self._save_settings()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts/pauses, Escape or R resets."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key in (Qt.Key.Key_Escape, Qt.Key.Key_R):
            self._engine.reset()
            event.accept()
            return
        super().keyPressEvent(event)

    # ── geometry / persistence ───────────────────────────────────────────

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._geometry_save_timer.start()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._geometry_save_timer.start()

    def _save_geometry(self) -> None:
        geo = self.geometry()
        self._settings.window_x = geo.x()
        self._settings.window_y = geo.y()
        self._settings.window_width = geo.width()
        self._settings.window_height = geo.height()
        self._save_settings()

    def _save_settings(self) -> None:
        if not self._persist_settings:
            return
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._engine.shutdown()
        self._geometry_save_timer.stop()
        self._save_geometry()
        super().closeEvent(event)
