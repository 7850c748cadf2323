from __future__ import annotations

import logging
from typing import Callable, List

from magico.core.mixer import (
    BLACK,
    Color,
    clamp_ratio,
    contrast_color,
    is_dark,
    mix,
    ratio_percent,
    to_hex,
)

logger = logging.getLogger(__name__)

Listener = Callable[["MixerState"], None]


class MixerState:
    """View state for the mixer screen.

    Holds the two picked colors, the mix ratio and whether the "copied"
    notice is showing. Every effective change notifies subscribers, which
    re-render from the derived properties.

    The notice is token based: :meth:`show_notice` hands out a new token and
    :meth:`dismiss_notice` only hides the notice for the latest one, so a
    dismissal scheduled for an earlier copy can never hide a newer notice.
    """

    def __init__(
        self,
        first_color: Color = BLACK,
        second_color: Color = BLACK,
        ratio: float = 0.5,
    ) -> None:
        self._first_color = first_color
        self._second_color = second_color
        self._ratio = clamp_ratio(ratio)
        self._notice_visible = False
        self._notice_token = 0
        self._listeners: List[Listener] = []

    @property
    def first_color(self) -> Color:
        return self._first_color

    @property
    def second_color(self) -> Color:
        return self._second_color

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def notice_visible(self) -> bool:
        return self._notice_visible

    @property
    def notice_token(self) -> int:
        """Token of the most recent notice (0 before the first one)."""
        return self._notice_token

    @property
    def mixed_color(self) -> Color:
        return mix(self._first_color, self._second_color, self._ratio)

    @property
    def hex_code(self) -> str:
        return to_hex(self.mixed_color)

    @property
    def is_dark(self) -> bool:
        return is_dark(self.mixed_color)

    @property
    def text_color(self) -> Color:
        """Foreground color for text drawn over the mixed color."""
        return contrast_color(self.mixed_color)

    @property
    def ratio_label(self) -> str:
        return ratio_percent(self._ratio)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_first_color(self, color: Color) -> None:
        if color == self._first_color:
            return
        self._first_color = color
        self._changed("first_color")

    def set_second_color(self, color: Color) -> None:
        if color == self._second_color:
            return
        self._second_color = color
        self._changed("second_color")

    def set_ratio(self, ratio: float) -> None:
        """Store ``ratio`` clamped into [0, 1]."""
        value = clamp_ratio(ratio)
        if value == self._ratio:
            return
        self._ratio = value
        self._changed("ratio")

    def show_notice(self) -> int:
        """Show the copy notice and return the token that may dismiss it."""
        self._notice_token += 1
        self._notice_visible = True
        self._changed("notice")
        return self._notice_token

    def dismiss_notice(self, token: int) -> bool:
        """Hide the notice if ``token`` is still the latest one."""
        if token != self._notice_token:
            logger.debug("Ignoring stale notice dismissal (token %d, current %d)", token, self._notice_token)
            return False
        if not self._notice_visible:
            return False
        self._notice_visible = False
        self._changed("notice")
        return True

    def _changed(self, field: str) -> None:
        logger.debug("Mixer state changed: %s", field)
        for listener in list(self._listeners):
            listener(self)
