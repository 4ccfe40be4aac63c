# SPDX-License-Identifier: MIT

MIN_ZOOM_PERCENT = 50
MAX_ZOOM_PERCENT = 150
ZOOM_STEP_PERCENT = 10
DEFAULT_ZOOM_PERCENT = 100


def clamp_zoom(percent: int) -> int:
    """Clamp into [50, 150] and snap to the nearest multiple of the step."""
    snapped = int(round(percent / ZOOM_STEP_PERCENT)) * ZOOM_STEP_PERCENT
    return min(MAX_ZOOM_PERCENT, max(MIN_ZOOM_PERCENT, snapped))


class ZoomController:
    """
    Rendering width multiplier for the timeline area.

    Only the absolute width of the rendered timeline changes; bar
    percentages are computed independently of the zoom.
    """

    def __init__(self, percent: int = DEFAULT_ZOOM_PERCENT) -> None:
        self._percent = clamp_zoom(percent)

    @property
    def percent(self) -> int:
        return self._percent

    def set_percent(self, percent: int) -> int:
        self._percent = clamp_zoom(percent)
        return self._percent

    def zoom_in(self) -> int:
        return self.set_percent(self._percent + ZOOM_STEP_PERCENT)

    def zoom_out(self) -> int:
        return self.set_percent(self._percent - ZOOM_STEP_PERCENT)

    def scale(self, width: int) -> int:
        return max(1, round(width * self._percent / 100))
