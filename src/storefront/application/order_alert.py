"""New-order alert for staff views.

Two independent timers, both advisory:

* a visual highlight that stays on for ``VISUAL_WINDOW`` after the
  latest trigger;
* a spoken announcement that is not repeated until ``VOICE_COOLDOWN``
  has passed since the previous one.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

from storefront.domain.model.order import utc_now

VISUAL_WINDOW = timedelta(seconds=3)
VOICE_COOLDOWN = timedelta(seconds=5)
ALERT_MESSAGE = "You have a new order, please handle it promptly."


class OrderAlert:

    def __init__(
        self,
        speaker: Callable[[str], None],
        clock: Callable[[], datetime] = utc_now,
        message: str = ALERT_MESSAGE,
    ) -> None:
        self._speaker = speaker
        self._clock = clock
        self._message = message
        self._visual_until: datetime | None = None
        self._last_spoken: datetime | None = None

    def trigger(self) -> bool:
        """Raise the alert.  Returns True if it was spoken this time."""
        now = self._clock()
        self._visual_until = now + VISUAL_WINDOW

        if self._last_spoken is not None and now - self._last_spoken <= VOICE_COOLDOWN:
            return False
        self._speaker(self._message)
        self._last_spoken = now
        return True

    @property
    def visible(self) -> bool:
        return self._visual_until is not None and self._clock() < self._visual_until
