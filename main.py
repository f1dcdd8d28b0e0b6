# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Freegroup CLI Entry Point.

Dispatches word-reduction tasks, e.g.::

    python main.py name=reduce 'words=[abBA, aa, abA]'
    python main.py name=verify verify.max_length=8
"""

import hydra
from omegaconf import DictConfig
from tasks.reduce import ReduceTask
from tasks.verify import VerifyTask
from tasks.growth import GrowthTask

TASKS = {
    'reduce': ReduceTask,
    'verify': VerifyTask,
    'growth': GrowthTask,
}


def build_task(cfg: DictConfig):
    """Instantiates the task named by ``cfg.name``."""
    task_name = cfg.name
    if task_name not in TASKS:
        raise ValueError(f"Unknown task: {task_name}. Available: {list(TASKS.keys())}")
    return TASKS[task_name](cfg)


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Runs the configured task.

    Args:
        cfg (DictConfig): The plan.
    """
    build_task(cfg).run()

if __name__ == "__main__":
    main()
