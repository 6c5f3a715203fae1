"""Field publisher node - publishes the field at a fixed rate."""

from __future__ import annotations

import logging
import time
from threading import Thread
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from competition_field.field import CompetitionField

logger = logging.getLogger(__name__)


class FieldPublisherNode:
    """
    Drives CompetitionField.publish() once per control period.

    Stands in for the robot's periodic loop when the field runs outside
    one (simulation, replay, dashboard demos).

    Usage:
        node = FieldPublisherNode(field, rate=50.0)
        node.start()
        # ... producers move objects ...
        node.stop()
    """

    def __init__(self, competition_field: CompetitionField, rate: float = 50.0) -> None:
        """
        Args:
            competition_field: Field to publish.
            rate: Publishing rate in Hz.
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self._field = competition_field
        self._interval = 1.0 / rate
        self._running = False
        self._thread: Optional[Thread] = None
        self.cycles = 0
        self.failed_cycles = 0

    def start(self) -> None:
        """Start the publisher node (spawns background thread)."""
        if self._running:
            return
        self._running = True
        self._thread = Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.info("Field publisher started (%.1f Hz)", 1.0 / self._interval)

    def stop(self) -> None:
        """Stop the publisher node."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=1.0)
            self._thread = None
            logger.info("Field publisher stopped after %d cycle(s)", self.cycles)

    def step(self) -> bool:
        """Run one publish cycle. Returns False if a producer raised."""
        try:
            self._field.publish()
        except Exception:
            self.failed_cycles += 1
            logger.exception("Field publish failed")
            return False
        finally:
            self.cycles += 1
        return True

    def _run(self) -> None:
        """Main loop: publish, then sleep out the rest of the period."""
        next_time = time.monotonic()
        while self._running:
            self.step()
            next_time += self._interval
            delay = next_time - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            else:
                # Overran the period; don't try to catch up.
                next_time = time.monotonic()

    @property
    def is_running(self) -> bool:
        """Check if publisher node is running."""
        return self._running
