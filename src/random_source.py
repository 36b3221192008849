"""
sources of randomness for tile spawning

the grid only ever asks for two things: pick one item uniformly, or pick one
item by weight. passing a source in (instead of using the global `random`
module) lets tests and the gym environment control every spawn.
"""
import random
import time

import numpy as np


class RandomSource:
    """python `random.Random`, seeded from the wall clock unless a seed is given"""

    def __init__(self, seed=None):
        if seed is None:
            seed = time.time_ns()
        self.rng = random.Random(seed)

    def choice(self, items):
        """pick one item uniformly at random"""
        return self.rng.choice(items)

    def weighted_choice(self, items, weights):
        """pick one item with probability proportional to its weight"""
        return self.rng.choices(items, weights=weights, k=1)[0]


class NumpyRandomSource:
    """wraps a numpy Generator (e.g. gymnasium's `env.np_random`)"""

    def __init__(self, generator=None):
        self.generator = generator if generator is not None else np.random.default_rng()

    def choice(self, items):
        return items[int(self.generator.integers(len(items)))]

    def weighted_choice(self, items, weights):
        p = np.asarray(weights, dtype=np.float64)
        p = p / p.sum()
        return items[int(self.generator.choice(len(items), p=p))]
