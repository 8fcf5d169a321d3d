from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Literal

from .config import AnalyzerConfig
from .models import ReadabilityResult
from .readability import compute_readability

logger = logging.getLogger(__name__)

SessionState = Literal["idle", "pending", "computed"]


class ReadabilitySession:
    """
    Deliver readability results asynchronously, the way an interactive host does.

    Each ``submit`` call schedules a fresh computation after an optional delay.
    Requests are not cancelled; instead every submission gets a generation
    number and only the newest one may publish its result, so the latest
    request always wins even if an older one finishes after it.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        *,
        delay: float | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._config = config or AnalyzerConfig()
        if delay is None:
            delay = self._config.readability_delay_seconds
        self._delay = max(0.0, delay)
        self._owns_executor = executor is None
        self._executor: Executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="readability"
        )
        # Re-entrant so executors that run tasks inline cannot deadlock on publish.
        self._lock = threading.RLock()
        self._generation = 0
        self._state: SessionState = "idle"
        self._result: ReadabilityResult | None = None
        self._latest: Future[ReadabilityResult] | None = None

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def result(self) -> ReadabilityResult | None:
        """The most recent published result (kept while a newer one is pending)."""
        with self._lock:
            return self._result

    def submit(self, text: str) -> Future[ReadabilityResult]:
        """Schedule a readability analysis for ``text`` and return its future."""
        if not isinstance(text, str):
            raise TypeError(f"Expected text as str, got {type(text).__name__}.")
        with self._lock:
            self._generation += 1
            generation = self._generation
            if len(text.strip()) < self._config.min_readability_chars:
                # Too short to analyse: resolve at once without the delay.
                future: Future[ReadabilityResult] = Future()
                future.set_result(self._compute(generation, text))
            else:
                previous_state = self._state
                self._state = "pending"
                try:
                    future = self._executor.submit(self._run, generation, text)
                except Exception:
                    # Rejected by the executor (e.g. after close): nothing is in flight.
                    self._generation -= 1
                    self._state = previous_state
                    raise
            self._latest = future
        logger.debug("Submitted readability request generation=%d", generation)
        return future

    def wait(self, timeout: float | None = None) -> ReadabilityResult | None:
        """
        Block until the newest submission has published and return its result.

        ``timeout`` applies to each wait on an individual future; a
        TimeoutError from the future propagates to the caller.
        """
        while True:
            with self._lock:
                future = self._latest
            if future is None:
                return self.result
            future.result(timeout=timeout)
            with self._lock:
                if future is self._latest:
                    return self._result

    def reset(self) -> None:
        """Forget any result and ignore requests still in flight."""
        with self._lock:
            self._generation += 1
            self._state = "idle"
            self._result = None
            self._latest = None

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "ReadabilitySession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run(self, generation: int, text: str) -> ReadabilityResult:
        if self._delay:
            time.sleep(self._delay)
        return self._compute(generation, text)

    def _compute(self, generation: int, text: str) -> ReadabilityResult:
        result = compute_readability(text, self._config)
        with self._lock:
            if generation != self._generation:
                logger.debug(
                    "Discarding stale readability result generation=%d (latest=%d)",
                    generation,
                    self._generation,
                )
                return result
            self._result = result
            self._state = "computed"
        return result
