"""Look-ahead filtering of weather alerts for display."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ..config import Settings
from .models import NormalizedAlert, NormalizedCurrent, WeatherAlert


def filter_alerts(
    alerts: Iterable[WeatherAlert],
    look_ahead_hours: float,
    now: float,
) -> tuple[NormalizedAlert, ...]:
    """Return alerts active within the look-ahead window, in source order.

    An alert is kept when it has an event name, starts before
    `now + look_ahead_hours` and has not yet ended. Alerts sharing an event
    name are all kept.
    """
    window_end = now + look_ahead_hours * 3600
    return tuple(
        NormalizedAlert(
            event=alert.event,
            description=alert.description,
            start=alert.start,
            end=alert.end,
            sender=alert.sender_name,
        )
        for alert in alerts
        if alert.event and alert.start < window_end and alert.end > now
    )


def active_alerts(
    current: NormalizedCurrent,
    settings: Settings,
    now: float | None = None,
) -> tuple[NormalizedAlert, ...]:
    """Filter the alerts of a current-conditions record using `settings`."""
    if not settings.show_alerts or not current.alerts:
        return ()
    if now is None:
        now = time.time()
    return filter_alerts(current.alerts, settings.show_alerts_hours, now)
