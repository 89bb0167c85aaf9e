"""
Clock Port - Source of the current time for event payloads.
Implementation: mock_transport/infrastructure/clock.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...
