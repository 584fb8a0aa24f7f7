"""Threaded dining philosophers simulation with a monitoring thread."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO

from .parsing import Config


class Color(str, Enum):
    """ANSI colour escapes used in the simulation log."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One seat at the table with the two forks next to it."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal: int = 0
    meals_count: int = 0
    eating: bool = False
    thread: Optional[threading.Thread] = field(default=None, repr=False)


class Simulation:
    """Run philosophers and a monitor until one dies or all have eaten enough."""

    _POLL_SECONDS = 0.0005

    def __init__(self, config: Config, out: Optional[TextIO] = None) -> None:
        self.config = config
        self._out = out
        self._write_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self._over = False
        self.died: Optional[Philosopher] = None
        self.forks: List[threading.Lock] = [
            threading.Lock() for _ in range(config.philosophers)
        ]
        self.start = current_time_ms()
        # Philosopher i holds fork i on the left and fork i-1 (wrapping) on the right.
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=index + 1,
                left_fork=self.forks[index],
                right_fork=self.forks[index - 1],
                last_meal=self.start,
            )
            for index in range(config.philosophers)
        ]

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _write(self, philosopher: Philosopher, text: str, color: Color) -> None:
        elapsed = current_time_ms() - self.start
        self.out.write(
            f"{color.value}{elapsed} {philosopher.id} {text}{Color.RESET.value}\n"
        )
        self.out.flush()

    def _end(self) -> None:
        with self._dead_lock:
            self._over = True

    def is_over(self) -> bool:
        """Tell whether the simulation has been stopped."""
        with self._dead_lock:
            return self._over

    def message(self, philosopher: Philosopher, text: str, color: Color) -> None:
        """Log a state change unless the simulation is over."""
        with self._write_lock:
            if self.is_over():
                return
            self._write(philosopher, text, color)

    def _announce_death(self, philosopher: Philosopher) -> None:
        with self._write_lock:
            self._write(philosopher, "died", Color.RED)

    def sleep(self, ms: int) -> None:
        """Wait ``ms`` milliseconds, returning early once the simulation ends."""
        start = current_time_ms()
        while current_time_ms() - start < ms:
            time.sleep(self._POLL_SECONDS)
            if self.is_over():
                break

    def _start_eating(self, philosopher: Philosopher) -> None:
        with self._meal_lock:
            philosopher.eating = True
        self.message(philosopher, "is eating", Color.GREEN)
        with self._meal_lock:
            philosopher.last_meal = current_time_ms()
            philosopher.meals_count += 1
        self.sleep(self.config.time_to_eat)
        with self._meal_lock:
            philosopher.eating = False

    def _eat(self, philosopher: Philosopher) -> None:
        with philosopher.right_fork:
            self.message(philosopher, "has taken a fork", Color.YELLOW)
            if self.config.philosophers == 1:
                self.sleep(self.config.time_to_die)
                return
            with philosopher.left_fork:
                self.message(philosopher, "has taken a fork", Color.YELLOW)
                self._start_eating(philosopher)

    def routine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until the simulation ends."""
        if philosopher.id % 2 == 0:
            self.sleep(1)
        while not self.is_over():
            self._eat(philosopher)
            self.message(philosopher, "is sleeping", Color.BLUE)
            self.sleep(self.config.time_to_sleep)
            self.message(philosopher, "is thinking", Color.BLUE)

    def _all_ate(self) -> bool:
        required = self.config.meals_required
        if required is None:
            return False
        for philosopher in self.philosophers:
            with self._meal_lock:
                if philosopher.meals_count < required:
                    return False
        self._end()
        return True

    def _someone_died(self) -> bool:
        now = current_time_ms()
        for philosopher in self.philosophers:
            with self._meal_lock:
                starving = now - philosopher.last_meal >= self.config.time_to_die
                if starving and not philosopher.eating:
                    self._end()
                    self.died = philosopher
                    self._announce_death(philosopher)
                    return True
        return False

    def monitor(self) -> None:
        """Watch the table until everyone has eaten enough or someone starves."""
        running = True
        while running:
            if self._all_ate():
                running = False
            if self._someone_died():
                running = False
            if running:
                time.sleep(self._POLL_SECONDS)

    def run(self) -> Optional[Philosopher]:
        """Run the simulation to its end and return the philosopher who died, if any."""
        started: List[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(
                    target=self.routine, args=(philosopher,), daemon=True
                )
                thread.start()
                philosopher.thread = thread
                started.append(thread)
        except RuntimeError as exc:
            self._end()
            for thread in started:
                thread.join()
            raise RuntimeError("Error creating philosopher thread") from exc
        try:
            watcher = threading.Thread(target=self.monitor, daemon=True)
            watcher.start()
        except RuntimeError as exc:
            self._end()
            for thread in started:
                thread.join()
            raise RuntimeError("Error creating monitor thread") from exc
        for thread in started:
            thread.join()
        watcher.join()
        return self.died