"""Step cards for the brew schedule.

Completed steps are hidden; the active one is highlighted and the rest
are dimmed.  A badge under the list counts the finished steps.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame,
)

from ..timer.engine import BrewSnapshot
from ..timer.schedule import DEFAULT_PRESET, Step, build_steps, format_time


def _repolish(widget: QWidget) -> None:
    style = widget.style()
    if style is not None:
        style.unpolish(widget)
        style.polish(widget)


class StepCard(QFrame):
    """One step: number bubble, offset, action chip, title and description."""

    def __init__(self, step: Step, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("stepCard")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)
        layout.setSpacing(12)

        self._number = QLabel(str(step.number), self)
        self._number.setObjectName("stepNumber")
        self._number.setFixedSize(28, 28)
        self._number.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._number, 0, Qt.AlignmentFlag.AlignTop)

        text_col = QVBoxLayout()
        text_col.setSpacing(4)

        header = QHBoxLayout()
        header.setSpacing(8)
        self._offset = QLabel(self)
        self._offset.setStyleSheet("background: transparent; font-weight: 600;")
        self._action = QLabel(self)
        self._action.setObjectName("actionChip")
        header.addWidget(self._offset)
        header.addWidget(self._action)
        header.addStretch(1)
        text_col.addLayout(header)

        self._title = QLabel(self)
        self._title.setStyleSheet("background: transparent; font-weight: 600; font-size: 15px;")
        text_col.addWidget(self._title)

        self._description = QLabel(self)
        self._description.setObjectName("stepDescription")
        self._description.setWordWrap(True)
        text_col.addWidget(self._description)

        layout.addLayout(text_col, 1)

        self._active = False
        self.set_step(step)

    def set_step(self, step: Step) -> None:
        self._step = step
        self._number.setText(str(step.number))
        self._offset.setText(format_time(step.offset_seconds))
        self._action.setText(step.action_label)
        self._title.setText(step.title)
        self._description.setText(step.description)

    def set_active(self, active: bool) -> None:
        self._active = active
        for w in (self, self._number):
            w.setProperty("active", active)
            _repolish(w)
        self._description.setProperty("pending", not active)
        _repolish(self._description)

    @property
    def step(self) -> Step:
        return self._step

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def description_text(self) -> str:
        return self._description.text()


class StepListWidget(QWidget):
    """All six step cards plus the "N steps completed" badge."""

    def __init__(self, steps: tuple[Step, ...] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        steps = steps or build_steps(DEFAULT_PRESET)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self._cards: list[StepCard] = []
        for step in steps:
            card = StepCard(step, self)
            self._cards.append(card)
            layout.addWidget(card)

        self._badge = QLabel(self)
        self._badge.setObjectName("doneBadge")
        self._badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._badge.setVisible(False)
        layout.addWidget(self._badge, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addStretch(1)

    def set_steps(self, steps: tuple[Step, ...]) -> None:
        """Swap in a new preset's text (same offsets, new water amounts)."""
        for card, step in zip(self._cards, steps):
            card.set_step(step)

    def render_snapshot(self, snap: BrewSnapshot) -> None:
        active = snap.active_step_index
        for i, card in enumerate(self._cards):
            card.setVisible(i >= active)
            card.set_active(i == active)

        done = snap.steps_completed
        if done > 0:
            noun = "step" if done == 1 else "steps"
            self._badge.setText(f"{done} {noun} completed")
            self._badge.setVisible(True)
        else:
            self._badge.setVisible(False)

    @property
    def cards(self) -> list[StepCard]:
        return list(self._cards)

    @property
    def badge_text(self) -> str:
        return self._badge.text() if not self._badge.isHidden() else ""
