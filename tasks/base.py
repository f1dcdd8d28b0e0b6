# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

from abc import ABC, abstractmethod
from omegaconf import DictConfig
from log import get_logger
from freegroup.free_group import FreeGroup

logger = get_logger(__name__)

class BaseTask(ABC):
    """Abstract base class for all tasks.

    Lifecycle: setup_group → get_data → evaluate → report.

    Attributes:
        cfg (DictConfig): Hydra configuration.
        group (FreeGroup): The free group the task works in.
    """

    def __init__(self, cfg: DictConfig):
        """Sets up the task.

        Args:
            cfg (DictConfig): Hydra config.
        """
        self.cfg = cfg
        self.group = self.setup_group()

    def setup_group(self) -> FreeGroup:
        """Builds the free group on ``cfg.alphabet`` (default ``a, b``)."""
        alphabet = self.cfg.get('alphabet', None)
        if alphabet is None:
            return FreeGroup(2)
        return FreeGroup(tuple(str(g) for g in alphabet))

    @abstractmethod
    def get_data(self):
        """Produce the inputs of the task."""
        pass

    @abstractmethod
    def evaluate(self, data) -> dict:
        """Run the task on ``data`` and return metrics."""
        pass

    def report(self, metrics: dict):
        """Log the metrics returned by :meth:`evaluate`."""
        for key, value in metrics.items():
            logger.info("%s: %s", key, value)

    def run(self) -> dict:
        """Execute the task end to end."""
        logger.info("Starting Task: %s on %r", self.cfg.name, self.group)
        data = self.get_data()
        metrics = self.evaluate(data)
        self.report(metrics)
        return metrics
