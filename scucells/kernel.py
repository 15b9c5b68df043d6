"""Discrete-event simulation kernel: signals, clocks, processes and modules.

The scheduler follows the evaluate/update/delta-cycle model. Processes run
in an evaluation phase. Signal writes take effect in the update phase that
follows. Value changes wake sensitive processes in the next delta cycle.
Simulated time only advances once no delta activity is left.
"""

from __future__ import annotations

import heapq
import inspect
import itertools
from typing import Any, Callable


class ScuError(RuntimeError):
    """Fatal error reported by a cell or by the kernel."""


class _Event:
    """Something a process can be sensitive to or wait on."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._static: list[_Process] = []
        self._waiting: list[_Process] = []

    def _fire(self) -> None:
        for process in self._static:
            process._static_trigger()
        waiting, self._waiting = self._waiting, []
        for process in waiting:
            process._dynamic_trigger()

    def __repr__(self) -> str:
        return f"<event {self.name}>"


class _Process:
    def __init__(self, sim: "Simulator", func: Callable[..., Any]) -> None:
        self._sim = sim
        self._func = func

    def _static_trigger(self) -> None:
        self._sim._make_runnable(self)

    def _dynamic_trigger(self) -> None:
        self._sim._make_runnable(self)

    def _run(self) -> None:
        self._func()


class _ThreadProcess(_Process):
    """A generator-based process that suspends itself by yielding."""

    def __init__(self, sim: "Simulator", func: Callable[..., Any]) -> None:
        super().__init__(sim, func)
        self._gen = None
        self._done = False
        self._waiting_static = True

    def _static_trigger(self) -> None:
        if self._waiting_static and not self._done:
            self._sim._make_runnable(self)

    def _run(self) -> None:
        if self._done:
            return
        if self._gen is None:
            self._gen = self._func()
        try:
            request = next(self._gen)
        except StopIteration:
            self._done = True
            return
        self._suspend(request)

    def _suspend(self, request: Any) -> None:
        self._waiting_static = False
        if request is None:
            self._waiting_static = True
        elif isinstance(request, Signal):
            request._changed._waiting.append(self)
        elif isinstance(request, _Event):
            request._waiting.append(self)
        elif isinstance(request, (int, float)) and not isinstance(request, bool):
            if request < 0:
                raise ValueError("a thread cannot wait a negative time")
            self._sim._schedule(request, lambda: self._sim._make_runnable(self))
        else:
            raise TypeError(f"a thread cannot wait on {request!r}")


def _as_event(item: Any) -> _Event:
    if isinstance(item, Signal):
        return item._changed
    if isinstance(item, _Event):
        return item
    raise TypeError(f"cannot be sensitive to {item!r}")


class Simulator:
    """Event scheduler holding simulated time and all runnable processes."""

    def __init__(self) -> None:
        self._now: float = 0
        self._timed: list[tuple[float, int, Callable[[], None]]] = []
        self._seq = itertools.count()
        self._names = itertools.count()
        self._runnable: list[_Process] = []
        self._runnable_ids: set[int] = set()
        self._updates: list[Signal] = []
        self._update_ids: set[int] = set()
        self._stopped = False
        self.delta_count = 0

    @property
    def now(self) -> float:
        """Current simulated time."""
        return self._now

    def method(self, func: Callable[[], None], *args: Any, initialize: bool = True) -> None:
        """Register ``func`` to run whenever one of ``args`` is notified.

        With ``initialize`` true the method also runs once at start-up.
        """
        process = _Process(self, func)
        for item in args:
            _as_event(item)._static.append(process)
        if initialize:
            self._make_runnable(process)

    def thread(self, func: Callable[[], Any], *args: Any) -> None:
        """Register a generator function as a thread process.

        The generator suspends by yielding ``None`` (wait on the static
        sensitivity ``args``), a signal or edge event, or a time delay.
        A thread with static sensitivity first runs on its first trigger;
        one without starts at initialization.
        """
        if not inspect.isgeneratorfunction(func):
            raise TypeError("a thread must be a generator function")
        process = _ThreadProcess(self, func)
        for item in args:
            _as_event(item)._static.append(process)
        if not args:
            self._make_runnable(process)

    def run(self, duration: float | None = None) -> float:
        """Simulate for ``duration`` time units, or until nothing is left.

        Returns early when :meth:`stop` is called. Without a duration and
        with a free-running clock, only :meth:`stop` ends the run.
        """
        if duration is not None and duration < 0:
            raise ValueError("duration must not be negative")
        end = None if duration is None else self._now + duration
        self._stopped = False
        while True:
            self._crunch()
            if self._stopped or not self._timed:
                break
            when = self._timed[0][0]
            if end is not None and when > end:
                break
            self._now = when
            while self._timed and self._timed[0][0] == when:
                _, _, callback = heapq.heappop(self._timed)
                callback()
        if end is not None and not self._stopped:
            self._now = end
        return self._now

    def stop(self) -> None:
        """End the current run once the running delta cycle completes."""
        self._stopped = True

    def _crunch(self) -> None:
        while self._runnable or self._updates:
            processes, self._runnable = self._runnable, []
            self._runnable_ids.clear()
            for process in processes:
                process._run()
            updates, self._updates = self._updates, []
            self._update_ids.clear()
            for signal in updates:
                signal._update()
            self.delta_count += 1
            if self._stopped:
                break

    def _make_runnable(self, process: _Process) -> None:
        if id(process) not in self._runnable_ids:
            self._runnable_ids.add(id(process))
            self._runnable.append(process)

    def _request_update(self, signal: "Signal") -> None:
        if id(signal) not in self._update_ids:
            self._update_ids.add(id(signal))
            self._updates.append(signal)

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._timed, (self._now + delay, next(self._seq), callback))

    def _auto_name(self, prefix: str) -> str:
        return f"{prefix}_{next(self._names)}"


class Signal:
    """A value channel whose writes become visible in the update phase."""

    def __init__(self, sim: Simulator, initial: Any = False, name: str | None = None) -> None:
        self.sim = sim
        self.name = name if name is not None else sim._auto_name("signal")
        self._value = initial
        self._next = initial
        self._changed = _Event(f"{self.name}.changed")
        self._pos = _Event(f"{self.name}.pos")
        self._neg = _Event(f"{self.name}.neg")

    def read(self) -> Any:
        """Return the current value."""
        return self._value

    def write(self, value: Any) -> None:
        """Schedule ``value`` to become current in the next update phase."""
        self._next = value
        self.sim._request_update(self)

    def posedge(self) -> _Event:
        """Event notified when the value goes from false to true."""
        return self._pos

    def negedge(self) -> _Event:
        """Event notified when the value goes from true to false."""
        return self._neg

    def _update(self) -> None:
        if self._next == self._value:
            return
        old, self._value = self._value, self._next
        self._changed._fire()
        if not old and self._value:
            self._pos._fire()
        elif old and not self._value:
            self._neg._fire()

    def __repr__(self) -> str:
        return f"Signal({self.name}={self._value!r})"


class Clock(Signal):
    """A free-running boolean signal."""

    def __init__(
        self,
        sim: Simulator,
        name: str = "clock",
        period: float = 10,
        duty_cycle: float = 0.5,
        start_time: float = 0,
        posedge_first: bool = True,
    ) -> None:
        if period <= 0:
            raise ValueError("clock period must be positive")
        if not 0 < duty_cycle < 1:
            raise ValueError("clock duty cycle must lie strictly between 0 and 1")
        if start_time < 0:
            raise ValueError("clock start time must not be negative")
        super().__init__(sim, not posedge_first, name)
        self.period = period
        self.duty_cycle = duty_cycle
        self.start_time = start_time
        self._high = period * duty_cycle
        self._low = period - self._high
        sim._schedule(start_time, self._toggle)

    def _toggle(self) -> None:
        level = not self._value
        self.write(level)
        self.sim._schedule(self._high if level else self._low, self._toggle)


class Module:
    """Base for every cell: a named member of a simulation."""

    def __init__(self, sim: Simulator, name: str) -> None:
        self.sim = sim
        self.name = name

    @property
    def kind(self) -> str:
        """Cell kind used in error reports."""
        return type(self).__name__

    def report_fatal(self, message: str) -> None:
        """Raise :class:`ScuError` naming this cell."""
        raise ScuError(f"In {self.kind}: {self.name}\n{message}")

    def __repr__(self) -> str:
        return f"<{self.kind} {self.name}>"