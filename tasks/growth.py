# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Growth series: counted sphere sizes against the closed form."""

import numpy as np

from freegroup.metric import expected_sphere_sizes, sphere_sizes
from tasks.base import BaseTask
from log import get_logger

logger = get_logger(__name__)


class GrowthTask(BaseTask):

    def get_data(self):
        return self.cfg.get('growth', {}).get('max_length', 5)

    def evaluate(self, data) -> dict:
        counted = sphere_sizes(self.group, data)
        expected = expected_sphere_sizes(self.group.rank, data)
        for n, (c, e) in enumerate(zip(counted, expected)):
            logger.info("|S(%d)| = %d (expected %d)", n, c, e)
        return {
            'sphere_sizes': counted.tolist(),
            'ball_size': int(counted.sum()),
            'matches': bool(np.array_equal(counted, expected)),
        }
