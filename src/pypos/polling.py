"""Interval polling controller for read-only views.

A :class:`Poller` calls a zero-argument coroutine function immediately on
activation and then on a fixed interval, and exposes the latest snapshot
plus loading/refreshing/error flags to whatever is rendering it.

Usage::

    async with client.poll(client.store.fetch_kitchen_queues, interval=5.0) as poller:
        poller.subscribe(render)
        ...

Semantics worth knowing:

* A failed fetch never clears ``data``; it sets ``error`` until the next
  success.
* ``is_refreshing`` is only raised by :meth:`Poller.refetch`; timer ticks
  are silent apart from the data/error change they produce.
* Overlapping fetches are not deduplicated. By default whichever call
  resolves last wins; ``discard_out_of_order=True`` drops resolutions that
  are older than the newest one already applied.
* After :meth:`Poller.set_enabled` (``False``) or :meth:`Poller.close`,
  fetches started earlier can no longer touch the state.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pypos._constants import DEFAULT_POLL_INTERVAL
from pypos.exceptions import PosConfigError, PosError

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[[], Awaitable[T]]
ErrorHandler = Callable[[Exception], None]


class FetchState(StrEnum):
    """What the UI should show for the current fetch activity."""

    IDLE = "idle"
    LOADING = "loading"
    REFRESHING = "refreshing"
    ERROR = "error"


class PollerPhase(StrEnum):
    """Lifecycle phase of a :class:`Poller`."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    IDLE = "idle"
    REFRESHING = "refreshing"
    STOPPED = "stopped"
    TERMINAL = "terminal"


@dataclasses.dataclass(frozen=True)
class PollingOptions:
    """Poller configuration.

    Parameters
    ----------
    interval : float
        Seconds between automatic fetches. Must be positive.
    enabled : bool
        When ``False`` no initial fetch is made and no timer runs until
        :meth:`Poller.set_enabled` flips it on.
    stop_on_error : bool
        Cancel the timer after the first failed fetch. Re-enabling the
        poller resumes it.
    on_error : callable or None
        Called with the exception on every failed fetch, automatic or
        manual.
    discard_out_of_order : bool
        Tag fetches with a sequence number and ignore a resolution that is
        older than the newest one already applied.
    """

    interval: float = DEFAULT_POLL_INTERVAL
    enabled: bool = True
    stop_on_error: bool = False
    on_error: ErrorHandler | None = None
    discard_out_of_order: bool = False

    def __post_init__(self) -> None:
        if not self.interval > 0:
            raise PosConfigError(f"polling interval must be positive, got {self.interval}")


@dataclasses.dataclass(frozen=True)
class PollingResult(Generic[T]):
    """Immutable view of a poller's output at one point in time."""

    data: T | None
    is_loading: bool
    is_refreshing: bool
    error: Exception | None


Listener = Callable[[PollingResult[Any]], None]


class Poller(Generic[T]):
    """Repeatedly invoke *fetcher* and keep the latest result.

    The poller does nothing until :meth:`start` is called (or it is used as
    an async context manager). It must be started from inside a running
    event loop.
    """

    def __init__(self, fetcher: Fetcher[T], options: PollingOptions | None = None) -> None:
        self._fetcher = fetcher
        self._options = options or PollingOptions()
        self._enabled = self._options.enabled

        self._data: T | None = None
        self._error: Exception | None = None
        self._is_loading = True
        self._refreshing = 0

        self._started = False
        self._activated = False
        self._stopped = False
        self._closed = False
        # Bumped on every deactivation; fetches from an older generation are ignored.
        self._generation = 0
        self._sequence = 0
        self._applied_sequence = 0

        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[None]] = set()
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> Poller[T]:
        self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def options(self) -> PollingOptions:
        return self._options

    @property
    def data(self) -> T | None:
        """Last successfully fetched snapshot."""
        return self._data

    @property
    def error(self) -> Exception | None:
        """Error from the most recent failed fetch, cleared on success."""
        return self._error

    @property
    def is_loading(self) -> bool:
        """``True`` until the first fetch completes."""
        return self._is_loading

    @property
    def is_refreshing(self) -> bool:
        """``True`` while a :meth:`refetch` call is in flight."""
        return self._refreshing > 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_running(self) -> bool:
        """Whether the interval timer is alive."""
        return self._timer is not None and not self._timer.done()

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def fetch_state(self) -> FetchState:
        if self._is_loading:
            return FetchState.LOADING
        if self.is_refreshing:
            return FetchState.REFRESHING
        if self._error is not None:
            return FetchState.ERROR
        return FetchState.IDLE

    @property
    def phase(self) -> PollerPhase:
        if self._closed or (self._activated and not self._enabled):
            return PollerPhase.TERMINAL
        if not self._activated:
            return PollerPhase.UNINITIALIZED
        if self._stopped:
            return PollerPhase.STOPPED
        if self._is_loading:
            return PollerPhase.LOADING
        if self.is_refreshing:
            return PollerPhase.REFRESHING
        return PollerPhase.IDLE

    def snapshot(self) -> PollingResult[T]:
        return PollingResult(
            data=self._data,
            is_loading=self._is_loading,
            is_refreshing=self.is_refreshing,
            error=self._error,
        )

    def subscribe(self, listener: Callable[[PollingResult[T]], None]) -> Callable[[], None]:
        """Register *listener* for every state change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Mount the poller; activates immediately when enabled."""
        if self._closed:
            raise PosError("Poller is closed")
        if self._started:
            return
        self._started = True
        if self._enabled:
            self._activate()

    def set_enabled(self, enabled: bool) -> None:
        """Turn automatic polling on or off.

        Disabling keeps ``data`` but cancels the timer and detaches any
        fetch that is still in flight.
        """
        if self._closed or enabled == self._enabled:
            return
        self._enabled = enabled
        if not self._started:
            return
        if enabled:
            self._activate()
        else:
            self._deactivate()
            self._notify()

    async def refetch(self) -> None:
        """Fetch now, outside the timer schedule.

        Failures are captured into ``error``; this never raises for them.
        """
        if self._closed:
            _logger.debug("refetch() ignored on a closed poller")
            return
        await self._fetch(manual=True)

    async def close(self) -> None:
        """Tear down: cancel the timer and any automatic fetch in flight."""
        if self._closed:
            return
        self._closed = True
        self._cancel_timer()
        self._generation += 1
        self._listeners.clear()

        pending = [task for task in self._in_flight if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._in_flight.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _activate(self) -> None:
        self._activated = True
        self._stopped = False
        self._spawn_fetch()
        self._timer = asyncio.get_running_loop().create_task(self._run_timer(self._generation))

    def _deactivate(self) -> None:
        self._cancel_timer()
        self._generation += 1

    def _cancel_timer(self) -> None:
        timer = self._timer
        self._timer = None
        if timer is not None and not timer.done():
            timer.cancel()

    async def _run_timer(self, generation: int) -> None:
        interval = self._options.interval
        while generation == self._generation:
            await asyncio.sleep(interval)
            if generation != self._generation:
                return
            self._spawn_fetch()

    def _spawn_fetch(self) -> None:
        task = asyncio.get_running_loop().create_task(self._fetch(manual=False))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    def _is_live(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def _fetch(self, *, manual: bool) -> None:
        generation = self._generation
        self._sequence += 1
        sequence = self._sequence

        if manual:
            self._refreshing += 1
            self._notify()

        try:
            result = await self._fetcher()
        except Exception as exc:  # noqa: BLE001
            if self._is_live(generation):
                self._apply_error(exc, sequence)
        else:
            if self._is_live(generation):
                self._apply_data(result, sequence)
        finally:
            if manual:
                self._refreshing -= 1
                if self._is_live(generation):
                    self._notify()

    def _is_stale(self, sequence: int) -> bool:
        if not self._options.discard_out_of_order:
            return False
        if sequence < self._applied_sequence:
            _logger.debug(
                "Discarding out-of-order poll result #%d (newest applied #%d)",
                sequence,
                self._applied_sequence,
            )
            return True
        self._applied_sequence = sequence
        return False

    def _apply_data(self, result: T, sequence: int) -> None:
        if self._is_stale(sequence):
            return
        self._data = result
        self._error = None
        self._is_loading = False
        self._notify()

    def _apply_error(self, exc: Exception, sequence: int) -> None:
        if self._is_stale(sequence):
            return
        self._error = exc
        self._is_loading = False
        self._notify()

        on_error = self._options.on_error
        if on_error is not None:
            try:
                on_error(exc)
            except Exception:
                _logger.debug("on_error callback failed", exc_info=True)

        if self._options.stop_on_error and self._timer is not None:
            self._cancel_timer()
            self._stopped = True
            _logger.info("Polling stopped after error: %s", exc)

    def _notify(self) -> None:
        if not self._listeners:
            return
        result = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                _logger.debug("Poller listener failed", exc_info=True)
