"""Clock card: elapsed time, status line, Start/Pause and Reset.

Layout (top → bottom):
    - Elapsed time (m:ss, large)
    - Status line (READY / BREWING / PAUSED / DONE)
    - Button row: Start|Pause toggle, Reset
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import BrewTimer, BrewSnapshot, BrewState
from ..timer.schedule import format_time
from .styles import STATE_COLORS


STATUS_LABELS: dict[BrewState, str] = {
    BrewState.IDLE:      "READY",
    BrewState.RUNNING:   "BREWING",
    BrewState.PAUSED:    "PAUSED",
    BrewState.COMPLETED: "DONE",
}


class BrewClockWidget(QWidget):
    """Renders the clock from engine snapshots and forwards button clicks."""

    def __init__(self, engine: BrewTimer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self.render_snapshot(engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._clock_label = QLabel("0:00", card)
        self._clock_label.setObjectName("clockLabel")
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock_label)

        self._status_label = QLabel("READY", card)
        self._status_label.setObjectName("statusLabel")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status_label)

        layout.addSpacing(12)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("startButton")

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("resetButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._engine.snapshot_changed.connect(self.render_snapshot)

    # ── slots ─────────────────────────────────────────────────────────────

    def toggle(self) -> None:
        if self._engine.running:
            self._engine.pause()
        else:
            self._engine.start()

    def render_snapshot(self, snap: BrewSnapshot) -> None:
        self._clock_label.setText(format_time(snap.elapsed_seconds))
        self._clock_label.setStyleSheet(f"color: {STATE_COLORS[snap.state]};")
        self._status_label.setText(STATUS_LABELS[snap.state])

        # Pause is only offered while running; otherwise Start
        if snap.running:
            self._start_pause_btn.setText("Pause")
            self._start_pause_btn.setObjectName("pauseButton")
        else:
            self._start_pause_btn.setText("Start")
            self._start_pause_btn.setObjectName("startButton")
        self._start_pause_btn.setEnabled(snap.state != BrewState.COMPLETED)
        # objectName changes need a re-polish to pick up the QSS rule
        style = self._start_pause_btn.style()
        if style is not None:
            style.unpolish(self._start_pause_btn)
            style.polish(self._start_pause_btn)

    # ── accessors (tests / keyboard shortcuts) ───────────────────────────

    @property
    def clock_text(self) -> str:
        return self._clock_label.text()

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn
