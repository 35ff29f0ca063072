"""The dining philosophers simulation: forks, philosopher threads and a monitor."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Tuple

from .args import Config
from .shared import Guarded, wait_threads_ready, wait_threads_running
from .timing import TimeUnit, get_time, precise_sleep

RED = "\033[31m"
RST = "\033[0m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
WHITE = "\033[1;37m"

MONITOR_INTERVAL_US = 100


def assign_forks(philo_id: int, index: int, count: int) -> Tuple[int, int]:
    """Return the indices of the first and second fork a philosopher takes.

    Even-numbered philosophers reach for their own fork first, odd-numbered
    ones for their neighbour's, so the table cannot deadlock.
    """
    neighbour = (index + 1) % count
    if philo_id % 2 == 0:
        return index, neighbour
    return neighbour, index


def thinking_time(config: Config) -> int:
    """Milliseconds a philosopher thinks; zero for an even-sized table."""
    if config.num_of_philos % 2 == 0:
        return 0
    return max(config.time_to_eat * 2 - config.time_to_sleep, 0)


@dataclass
class Philosopher:
    """One seat at the table and the state the monitor watches."""

    id: int
    first_fork: threading.Lock
    second_fork: threading.Lock
    meals_eaten: Guarded[int] = field(default_factory=lambda: Guarded(0))
    last_meal: Guarded[int] = field(default_factory=lambda: Guarded(0))


class Simulation:
    """Runs one dining philosophers simulation to its end."""

    def __init__(self, config: Config, output: Optional[TextIO] = None) -> None:
        self.config = config
        self._output = output
        self.forks: List[threading.Lock] = [
            threading.Lock() for _ in range(config.num_of_philos)
        ]
        self.philosophers: List[Philosopher] = []
        for index in range(config.num_of_philos):
            philo_id = index + 1
            first, second = assign_forks(philo_id, index, config.num_of_philos)
            self.philosophers.append(
                Philosopher(philo_id, self.forks[first], self.forks[second])
            )
        self.ready: Guarded[bool] = Guarded(False)
        self.running: Guarded[int] = Guarded(0)
        self.ended: Guarded[bool] = Guarded(False)
        self.philo_died = False
        self.sim_start = get_time(TimeUnit.MILLI)
        self._print_lock = threading.Lock()

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def run(self) -> bool:
        """Run the simulation until it ends; return True if a philosopher died."""
        threads = [
            threading.Thread(target=self._routine, args=(philo,), daemon=True)
            for philo in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.sim_start = get_time(TimeUnit.MILLI)
        self.ready.set(True)
        monitor = threading.Thread(target=self._monitor, daemon=True)
        monitor.start()
        for thread in threads:
            thread.join()
        monitor.join()
        return self.philo_died

    def print_status(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped status line unless the simulation has ended."""
        with self._print_lock:
            elapsed = get_time(TimeUnit.MILLI) - self.sim_start
            if not self.ended.get():
                self.output.write(f"{elapsed} {philosopher.id} {message}\n")
                self.output.flush()

    def all_have_eaten(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        if not self.config.limit_meals:
            return False
        return all(
            philo.meals_eaten.get() >= self.config.meals_to_have
            for philo in self.philosophers
        )

    def _sleep_ms(self, msec: int) -> None:
        precise_sleep(msec * 1000, self.ended.get)

    def _routine(self, philo: Philosopher) -> None:
        wait_threads_ready(self.ready)
        philo.last_meal.set(get_time(TimeUnit.MILLI))
        self.running.increment()
        if self.config.num_of_philos == 1:
            self._lone_philosopher(philo)
            return
        self._stagger(philo)
        while not self.ended.get():
            self._eat(philo)
            self._sleep(philo)
            self._think(philo)

    def _lone_philosopher(self, philo: Philosopher) -> None:
        with philo.first_fork:
            self.print_status(philo, "has taken a fork")
            self._sleep_ms(self.config.time_to_die)
            self.print_status(philo, "has died")
        self.ended.set(True)

    def _stagger(self, philo: Philosopher) -> None:
        if self.config.num_of_philos % 2 == 0:
            if philo.id % 2 == 0:
                self._sleep_ms(self.config.time_to_sleep // 2)
        elif philo.id % 2:
            self._think(philo)

    def _eat(self, philo: Philosopher) -> None:
        with philo.first_fork:
            self.print_status(philo, f"{YELLOW}has taken a fork{RST}")
            with philo.second_fork:
                self.print_status(philo, f"{YELLOW}has taken a fork{RST}")
                philo.last_meal.set(get_time(TimeUnit.MILLI))
                self.print_status(philo, f"{GREEN}is eating{RST}")
                self._sleep_ms(self.config.time_to_eat)
                philo.meals_eaten.increment()

    def _sleep(self, philo: Philosopher) -> None:
        self.print_status(philo, f"{BLUE}is sleeping{RST}")
        self._sleep_ms(self.config.time_to_sleep)

    def _think(self, philo: Philosopher) -> None:
        self.print_status(philo, f"{CYAN}is thinking{RST}")
        if self.config.num_of_philos % 2 == 0:
            return
        self._sleep_ms(thinking_time(self.config))

    def _monitor(self) -> None:
        wait_threads_running(self.running, self.config.num_of_philos)
        while not self.ended.get():
            for philo in self.philosophers:
                last_meal = philo.last_meal.get()
                if self.all_have_eaten():
                    self.ended.set(True)
                if get_time(TimeUnit.MILLI) - last_meal > self.config.time_to_die:
                    self.print_status(philo, f"{RED}has died{RST}")
                    self.ended.set(True)
                    self.philo_died = True
            precise_sleep(MONITOR_INTERVAL_US, self.ended.get)