"""Runnable tasks for the freegroup package.

Each task inherits from :class:`BaseTask` and implements the lifecycle:
setup_group, get_data, evaluate, report.
"""

from .base import BaseTask
from .reduce import ReduceTask
from .verify import VerifyTask
from .growth import GrowthTask

__all__ = [
    "BaseTask",
    "ReduceTask",
    "VerifyTask",
    "GrowthTask",
]
