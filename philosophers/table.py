"""The dining table: philosopher threads, forks and the monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from .args import Settings
from .clock import now_ms, sleep_ms


class Table:
    """Shared state of one simulation and the threads that act on it."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.count
        self.forks = [threading.Lock() for _ in range(count)]
        self._meal_locks = [threading.Lock() for _ in range(count)]
        self.last_meals = [0] * count
        self.total_meals = [0] * count
        self._end_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._ended = False
        self._seated = 0
        self.start = now_ms()

    def _elapsed(self) -> int:
        return now_ms() - self.start

    def _finish(self) -> None:
        with self._end_lock:
            self._ended = True

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        flush = getattr(self.out, "flush", None)
        if flush is not None:
            flush()

    def print_state(self, ph: int, state: str) -> None:
        """Log a philosopher's state unless the simulation has ended."""
        with self._write_lock:
            if self.is_over():
                return
            self._write(f"{self._elapsed()} {ph} {state}")

    def is_over(self) -> bool:
        """Tell whether the simulation has ended."""
        with self._end_lock:
            return self._ended

    def _wait_for_all_seated(self) -> None:
        while True:
            with self._end_lock:
                if self._seated >= self.settings.count:
                    return
            time.sleep(0.0001)

    def _eat_cycle(self, ph: int) -> None:
        left = self.forks[ph]
        right = self.forks[(ph + 1) % self.settings.count]
        left.acquire()
        self.print_state(ph, "has taken a fork")
        if self.settings.count == 1:
            while not self.is_over():
                sleep_ms(1)
            left.release()
            return
        right.acquire()
        self.print_state(ph, "has taken a fork")
        with self._meal_locks[ph]:
            self.last_meals[ph] = self._elapsed()
            self.print_state(ph, "is eating")
            if self.settings.meals is not None:
                self.total_meals[ph] += 1
        if self.is_over():
            right.release()
            left.release()
            return
        sleep_ms(self.settings.time_to_eat)
        self.print_state(ph, "is sleeping")
        right.release()
        left.release()
        sleep_ms(self.settings.time_to_sleep)
        self.print_state(ph, "is thinking")

    def philosopher(self, ph: int) -> None:
        """Run philosopher ``ph`` until the simulation ends."""
        with self._end_lock:
            self._seated += 1
        self._wait_for_all_seated()
        sleep_ms((self.settings.time_to_eat // 2) * (ph % 2))
        while True:
            self._eat_cycle(ph)
            if self.is_over():
                break

    def _all_fed(self) -> bool:
        target = self.settings.meals
        for lock, eaten in zip(self._meal_locks, range(self.settings.count)):
            with lock:
                if self.total_meals[eaten] < target:
                    return False
        self._finish()
        return True

    def monitor(self) -> None:
        """Watch for starvation or for every philosopher having eaten enough."""
        while True:
            for ph, lock in enumerate(self._meal_locks):
                with lock:
                    starving = self._elapsed() - self.last_meals[ph] > self.settings.time_to_die
                if starving:
                    self._finish()
                    with self._write_lock:
                        self._write(f"{self._elapsed()} {ph} died")
                    return
            if self.settings.meals is not None and self._all_fed():
                return
            time.sleep(0.0005)

    def run(self) -> None:
        """Start every philosopher and the monitor, then wait for them all."""
        diners = [
            threading.Thread(target=self.philosopher, args=(ph,), daemon=True)
            for ph in range(self.settings.count)
        ]
        for diner in diners:
            diner.start()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        for diner in diners:
            diner.join()
        watcher.join()