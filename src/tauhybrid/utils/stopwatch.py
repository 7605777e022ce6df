"""Timers used to profile the processing stages of each event."""

import time
from dataclasses import dataclass

__all__ = ["Time", "Stopwatch", "StopwatchManager"]


@dataclass
class Time:
    """Simple dataclass to hold time information.

    Attributes
    ----------
    wall : float, optional
         Wall time
    cpu : float, optional
         CPU time
    """

    wall: float = None
    cpu: float = None

    def __add__(self, other):
        return Time(wall=self.wall + other.wall, cpu=self.cpu + other.cpu)

    def __sub__(self, other):
        return Time(wall=self.wall - other.wall, cpu=self.cpu - other.cpu)

    @property
    def set(self):
        """Whether this time has been recorded."""
        return self.wall is not None

    @classmethod
    def current(cls):
        """Returns the current time (wall and cpu).

        Returns
        -------
        Time
           Current time
        """
        return cls(time.time(), time.process_time())


class Stopwatch:
    """Holds the timing information of one processing stage."""

    def __init__(self):
        self._start = Time()
        self._stop = Time()
        self._total = Time(0.0, 0.0)
        self.count = 0

    @property
    def running(self):
        """Whether the stopwatch is currently running."""
        return self._start.set and not self._stop.set

    def start(self):
        """Start the stopwatch."""
        if self.running:
            raise ValueError("Cannot restart a watch that has not been stopped.")

        self._start = Time.current()
        self._stop = Time()

    def stop(self):
        """Stop the stopwatch, accumulate the elapsed time."""
        if not self.running:
            raise ValueError("Cannot stop a watch that is not running.")

        self._stop = Time.current()
        self._total += self.time
        self.count += 1

    @property
    def time(self):
        """Time between the last start and the last stop."""
        if not self._stop.set:
            raise ValueError("Cannot get time of watch that has not been stopped.")

        return self._stop - self._start

    @property
    def time_sum(self):
        """Sum of times between all watch starts and stops."""
        return self._total


class StopwatchManager:
    """Simple class to organize various time measurements."""

    def __init__(self):
        self._watch = {}

    def keys(self):
        """List of initialized stopwatch names."""
        return self._watch.keys()

    def items(self):
        """List of (name, stopwatch) pairs."""
        return self._watch.items()

    def initialize(self, key):
        """Initialize one or more stopwatches, resetting existing ones.

        Parameters
        ----------
        key : Union[str, List[str]]
            Key or list of keys to initialize a `Stopwatch` for
        """
        keys = [key] if isinstance(key, str) else key
        for k in keys:
            self._watch[k] = Stopwatch()

    def _get(self, key):
        if key not in self._watch:
            raise KeyError(f"No stopwatch initialized under the name: {key}")

        return self._watch[key]

    def start(self, key):
        """Starts the stopwatch under a given name."""
        self._get(key).start()

    def stop(self, key):
        """Stops the stopwatch under a given name."""
        self._get(key).stop()

    def time(self, key):
        """Returns the time recorded between the last start and stop."""
        return self._get(key).time

    def time_sum(self, key):
        """Returns the sum of times recorded between each start/stop pair."""
        return self._get(key).time_sum

    def times_sum(self):
        """Returns the total time of each stopwatch as a dictionary.

        Returns
        -------
        Dict[str, Time]
            Execution time of all iterations of each process so far
        """
        return {key: watch.time_sum for key, watch in self.items()}
