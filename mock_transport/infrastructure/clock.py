"""System clock - timestamps for event payloads."""

from datetime import datetime, timezone
from mock_transport.domain.ports.clock import Clock


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
