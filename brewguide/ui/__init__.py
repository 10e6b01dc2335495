"""UI widgets package."""

from .preset_picker import PresetPicker
from .step_list import StepCard, StepListWidget
from .timer_widget import BrewClockWidget

__all__ = [
    "PresetPicker",
    "StepCard",
    "StepListWidget",
    "BrewClockWidget",
]
