# tline/tl_clock.py
"""
Animation clock and tick sources.

The clock is the only mutable state in the package. A tick source is any
iterable; each item it yields advances the clock once. Stop iterating to cancel.
"""
from __future__ import annotations
import time
import logging
from typing import Iterable, Iterator, Optional

from .tl_config import DEFAULT_CONFIG, EngineConfig
from .tl_engine import Solution, evaluate
from .tl_errors import InvalidParameter
from .tl_params import LineParameters

logger = logging.getLogger(__name__)

class SimulationClock:
    def __init__(self, increment: float = DEFAULT_CONFIG.tick_increment, speed: float = 1.0):
        if not increment > 0:
            raise InvalidParameter('increment', "must be > 0")
        self.increment = increment
        self.speed = speed
        self._time = 0.0
        self.running = True

    @classmethod
    def for_frequency(cls, frequency_hz: float, steps_per_period: int = 50, speed: float = 1.0):
        """Clock that needs steps_per_period ticks for one RF period at speed 1."""
        if not frequency_hz > 0 or steps_per_period < 1:
            raise InvalidParameter('frequency_hz', "need frequency > 0 and steps_per_period >= 1")
        return cls(increment=1.0/(frequency_hz*steps_per_period), speed=speed)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float):
        if value < 0:
            raise InvalidParameter('speed', "must be >= 0")
        self._speed = float(value)

    @property
    def time(self) -> float:
        return self._time

    def tick(self) -> float:
        if self.running:
            self._time += self.increment*self._speed
        return self._time

    def pause(self):
        self.running = False

    def resume(self):
        self.running = True

    def reset(self):
        self._time = 0.0

    def __repr__(self):
        state = 'running' if self.running else 'paused'
        return f"SimulationClock(t={self._time:g}, speed={self._speed:g}, {state})"

class ManualTickSource:
    """Deterministic tick source: yields `count` ticks immediately (forever if None)."""
    def __init__(self, count: Optional[int] = None):
        self.count = count

    def __iter__(self) -> Iterator[int]:
        k = 0
        while self.count is None or k < self.count:
            yield k
            k += 1

class IntervalTickSource:
    """Wall-clock ticks every `interval` seconds, independent of any display frame rate."""
    def __init__(self, interval: float = DEFAULT_CONFIG.tick_interval, count: Optional[int] = None,
                 clock=time.monotonic, sleep=time.sleep):
        if not interval > 0:
            raise InvalidParameter('interval', "must be > 0")
        self.interval = interval
        self.count = count
        self._clock = clock
        self._sleep = sleep

    def __iter__(self) -> Iterator[int]:
        k = 0
        deadline = self._clock()
        while self.count is None or k < self.count:
            deadline += self.interval
            delay = deadline - self._clock()
            if delay > 0:
                self._sleep(delay)
            yield k
            k += 1

def animate(p: LineParameters, clock: SimulationClock, ticks: Iterable,
            config: EngineConfig = DEFAULT_CONFIG, **kwargs) -> Iterator[Solution]:
    """One full re-evaluation per tick at the clock's current time, at the record's speed."""
    clock.speed = p.speed_multiplier
    for _ in ticks:
        t = clock.tick()
        yield evaluate(p, t, config=config, **kwargs)
    logger.debug("tick source exhausted at t=%g", clock.time)
