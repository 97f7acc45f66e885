"""The dining table: philosophers, forks and the threads that run them."""

from __future__ import annotations

import enum
import sys
import threading
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from philo.parsing import Args
from philo.timing import now_ms, sleep_ms

_MAX_ELAPSED = 2147483647

TAKEN_FORK = "has taken a fork."
EATING = "is eating."
SLEEPING = "is sleeping."
THINKING = "is thinking"
DIED = "died."


class StopReason(enum.IntEnum):
    """Why the simulation ended, or RUNNING while it has not."""

    RUNNING = 0
    DIED = 1
    ALL_FED = 2


@dataclass
class Philosopher:
    """One seat at the table with the fork it owns."""

    id: int
    fork: threading.Lock = field(default_factory=threading.Lock)
    neighbour_fork: Optional[threading.Lock] = None
    neighbour_first: bool = False
    meals: int = 0
    finished: bool = False
    last_meal: int = 0
    thread: Optional[threading.Thread] = None


class Table:
    """Runs one dining philosophers simulation and reports it to ``out``."""

    def __init__(self, args: Args, out: Optional[TextIO] = None) -> None:
        self.args = args
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self.reason = StopReason.RUNNING
        self._fed = 0
        self._state_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self.philosophers: List[Philosopher] = [
            Philosopher(id=number, last_meal=self.start_time)
            for number in range(1, args.num_philos + 1)
        ]
        if len(self.philosophers) > 1:
            neighbours = self.philosophers[1:] + self.philosophers[:1]
            for philo, neighbour in zip(self.philosophers, neighbours):
                philo.neighbour_fork = neighbour.fork
                # The last seat reaches for the lower-numbered fork first,
                # so the forks are always taken in one global order.
                philo.neighbour_first = neighbour.id < philo.id

    def is_stopped(self) -> bool:
        """Return True once somebody died or everybody has eaten enough."""
        with self._state_lock:
            return self.reason != StopReason.RUNNING

    def _stop(self, reason: StopReason) -> None:
        with self._state_lock:
            self.reason = reason

    def write_status(self, philo: Philosopher, message: str) -> None:
        """Print a timestamped status line unless the simulation has ended."""
        with self._write_lock:
            elapsed = now_ms() - self.start_time
            if 0 <= elapsed <= _MAX_ELAPSED and not self.is_stopped():
                self.out.write(f"{elapsed} Philo {philo.id} {message}\n")
                self.out.flush()

    def _has_died(self, philo: Philosopher) -> bool:
        if self.is_stopped():
            return False
        with self._state_lock:
            finished = philo.finished
        if finished or now_ms() - philo.last_meal < self.args.time_die:
            return False
        self.write_status(philo, DIED)
        self._stop(StopReason.DIED)
        return True

    def _dine(self, philo: Philosopher) -> None:
        if philo.neighbour_fork is None:
            with philo.fork:
                self.write_status(philo, TAKEN_FORK)
                sleep_ms(self.args.time_die)
            return
        first, second = philo.fork, philo.neighbour_fork
        if philo.neighbour_first:
            first, second = second, first
        with first:
            self.write_status(philo, TAKEN_FORK)
            with second:
                self.write_status(philo, TAKEN_FORK)
                self.write_status(philo, EATING)
                philo.last_meal = now_ms()
                sleep_ms(self.args.time_eat)
        self.write_status(philo, SLEEPING)
        sleep_ms(self.args.time_sleep)
        self.write_status(philo, THINKING)

    def _live(self, philo: Philosopher) -> None:
        if philo.id % 2 == 0:
            sleep_ms(self.args.time_eat // 10)
        while not self.is_stopped():
            self._dine(philo)
            if self._has_died(philo):
                return
            philo.meals += 1
            if self.args.must_eat is not None and philo.meals == self.args.must_eat:
                with self._state_lock:
                    philo.finished = True
                    self._fed += 1
                    all_fed = self._fed == self.args.num_philos
                if all_fed:
                    self._stop(StopReason.ALL_FED)
                return

    def start(self) -> None:
        """Reset the clock and start one thread per philosopher."""
        self.start_time = now_ms()
        for philo in self.philosophers:
            philo.last_meal = self.start_time
            philo.thread = threading.Thread(
                target=self._live, args=(philo,), daemon=True
            )
            philo.thread.start()

    def wait(self) -> StopReason:
        """Block until the simulation stops, join the threads and report."""
        while not self.is_stopped():
            sleep_ms(1)
        for philo in self.philosophers:
            if philo.thread is not None:
                philo.thread.join()
        if self.reason == StopReason.ALL_FED:
            self.out.write(f"Each philosopher ate {self.args.must_eat} time(s)\n")
            self.out.flush()
        return self.reason

    def run(self) -> StopReason:
        """Start the simulation and wait for it to end."""
        self.start()
        return self.wait()