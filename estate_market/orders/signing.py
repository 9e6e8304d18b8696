"""Delayed, cancellable completion of contract signing."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable

from estate_market.models import Order

logger = logging.getLogger(__name__)


class SigningState(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PendingSignature:
    """A single-shot signing completion that becomes due after a delay.

    Nothing runs in the background: the owner calls :meth:`poll` or
    :meth:`wait`. Used as a context manager, leaving the block before the
    completion ran cancels it, so a torn-down caller never applies a late
    mutation.

    Parameters
    ----------
    order_id : str
        Order being signed.
    complete : Callable[[], Order | None]
        Applies the signature. Called at most once.
    delay : float
        Seconds until the completion is due.
    timer : Callable[[], float]
        Monotonic clock.
    sleep : Callable[[float], None]
        Used by :meth:`wait`.
    """

    def __init__(
        self,
        order_id: str,
        complete: Callable[[], Order | None],
        delay: float,
        timer: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.order_id = order_id
        self._complete = complete
        self._timer = timer
        self._sleep = sleep
        self.due_at = timer() + delay
        self.state = SigningState.SCHEDULED
        self.result: Order | None = None

    def __enter__(self) -> PendingSignature:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.state == SigningState.SCHEDULED:
            self.cancel()

    @property
    def remaining(self) -> float:
        return max(0.0, self.due_at - self._timer())

    def ready(self) -> bool:
        return self.state == SigningState.SCHEDULED and self.remaining == 0.0

    def cancel(self) -> bool:
        """Cancel the completion. Returns ``False`` if it already ran or was cancelled."""
        if self.state != SigningState.SCHEDULED:
            return False
        self.state = SigningState.CANCELLED
        logger.debug("Signing of order %s cancelled", self.order_id)
        return True

    def poll(self) -> Order | None:
        """Run the completion if it is due; otherwise do nothing."""
        if self.ready():
            self._run()
        return self.result

    def wait(self) -> Order | None:
        """Block until the completion is due, then run it."""
        if self.state == SigningState.SCHEDULED:
            remaining = self.remaining
            if remaining > 0:
                self._sleep(remaining)
            if self.state == SigningState.SCHEDULED:
                self._run()
        return self.result

    def _run(self) -> None:
        self.state = SigningState.COMPLETED
        self.result = self._complete()
