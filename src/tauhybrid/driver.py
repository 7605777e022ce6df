"""Hybrid tau driver class.

Takes care of everything in one centralized place:
- Configuration processing
- Producer initialization
- Event loop over in-memory event dictionaries
- Profiling
"""

import logging

from .config import ConfigTypeError, ConfigValidationError, load_config
from .hybrid import HybridTauProducer
from .utils.logger import logger
from .utils.stopwatch import StopwatchManager
from .version import __version__

__all__ = ["Driver"]


class Driver:
    """Central hybrid tau driver.

    It takes a configuration dictionary of the form:

    .. code-block:: yaml

        base:
          verbosity: info
          log_step: 100
        producer:
          <Hybrid tau producer configuration>

    Events are dictionaries which contain at least the tau and jet
    collections named in the producer `sources`. Reading them from and
    writing them to file is left to the caller.
    """

    # Allowed logging levels
    _verbosities = ("debug", "info", "warning", "error", "critical")

    def __init__(self, cfg):
        """Initializes the class attributes.

        Parameters
        ----------
        cfg : dict
            Global configuration dictionary
        """
        # Initialize the timers
        self.watch = StopwatchManager()
        self.watch.initialize(["iteration", "producer"])

        # Process the full configuration dictionary
        base, producer = self.process_config(**cfg)

        # Initialize the base driver configuration parameters
        self.initialize_base(**base)

        # Initialize the producer
        self.producer = HybridTauProducer.from_config(producer)
        self.num_processed = 0

    @classmethod
    def from_file(cls, cfg_path):
        """Builds a driver from a YAML configuration file.

        Parameters
        ----------
        cfg_path : str
            Path to the configuration file

        Returns
        -------
        Driver
            Initialized driver
        """
        return cls(load_config(cfg_path))

    @staticmethod
    def process_config(base=None, producer=None, **unknown):
        """Checks the top-level blocks of the configuration.

        Parameters
        ----------
        base : dict, optional
            Base driver configuration
        producer : dict
            Hybrid tau producer configuration
        **unknown : dict
            Any other block, which is not allowed

        Returns
        -------
        dict
            Base driver configuration
        dict
            Producer configuration
        """
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration blocks: {list(unknown)}. "
                "Must be one of ['base', 'producer']."
            )
        if producer is None:
            raise ConfigValidationError(
                "The configuration must contain a `producer` block."
            )

        base = base if base is not None else {}
        if not isinstance(base, dict):
            raise ConfigTypeError(
                "The `base` configuration block must be a dictionary."
            )

        return base, producer

    def initialize_base(self, verbosity="info", log_step=None):
        """Initialize the base driver parameters.

        Parameters
        ----------
        verbosity : str, default 'info'
            Verbosity level of the package logger
        log_step : int, optional
            Number of events between two progress reports. If not specified,
            progress is not reported.
        """
        # Set the verbosity of the logger
        if verbosity.lower() not in self._verbosities:
            raise ConfigValidationError(
                f"Verbosity not recognized: {verbosity}. Must be one of "
                f"{list(self._verbosities)}."
            )
        logger.setLevel(getattr(logging, verbosity.upper()))

        # Store the logging period
        assert log_step is None or log_step > 0, "`log_step` must be positive."
        self.log_step = log_step

        logger.info("Hybrid tau driver, version %s.", __version__)

    def process(self, data):
        """Process one event.

        Parameters
        ----------
        data : dict
            Dictionary of data products of one event

        Returns
        -------
        dict
            Input dictionary updated with the hybrid tau collection
        """
        self.watch.start("iteration")
        self.watch.start("producer")
        result = self.producer(data)
        self.watch.stop("producer")

        data.update(result)
        self.watch.stop("iteration")
        self.num_processed += 1

        if self.log_step is not None and self.num_processed % self.log_step == 0:
            wall = self.watch.time_sum("iteration").wall
            logger.info(
                "Processed %d events (%.3f ms/event).",
                self.num_processed,
                1e3 * wall / self.num_processed,
            )

        return data

    def run(self, events):
        """Process a sequence of events, one at a time.

        Parameters
        ----------
        events : Iterable[dict]
            Dictionaries of data products, one per event

        Yields
        ------
        dict
            Each event dictionary updated with its hybrid tau collection
        """
        for data in events:
            yield self.process(data)

    def times(self):
        """Returns the accumulated execution time of each stage.

        Returns
        -------
        Dict[str, Time]
            Execution time of all events processed so far, per stage
        """
        return self.watch.times_sum()
