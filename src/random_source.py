#!/usr/bin/env python3
'''
Source of randomness shared by every stochastic step of the filter.
'''

from threading import Lock

import numpy as np

from errors import InvalidParameter


class RandomSource():
    def __init__(self, seed=None):
        '''
        Wrap a numpy Generator. Calls are serialized with a lock so a single
        instance may be handed to several worker threads.

        Input:
            seed: anything numpy.random.default_rng accepts. None draws
                  fresh entropy from the OS.
        '''
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.lock = Lock()


    def reseed(self, seed):
        '''
        Restart the underlying generator from a new seed.
        '''
        with self.lock:
            self.seed = seed
            self.rng = np.random.default_rng(seed)


    def gaussian(self, mean, std, size=None):
        '''
        Sample from Normal(mean, std). A zero std returns the mean.
        '''
        if not std >= 0:
            raise InvalidParameter(
                "standard deviation must be non-negative, got {}".format(std))
        with self.lock:
            return self.rng.normal(mean, std, size)


    def weighted_indices(self, weights, size):
        '''
        Draw indices with replacement, with probability proportional to
        weights. The weights do not need to be normalized.

        Input:
            weights: 1D array of non-negative values with a positive sum.
            size: number of draws.
        Output:
            Integer array of length size.
        '''
        weights = np.asarray(weights, dtype=float)
        if not weights.max(initial=0.0) > 0:
            raise InvalidParameter("weights must have a strictly positive sum")
        # Scale by the largest weight so the sum cannot overflow
        weights = weights / weights.max()
        total = weights.sum()
        with self.lock:
            return self.rng.choice(
                len(weights),
                size,
                replace=True,
                p=weights / total
                )


    def uniform_indices(self, n, size):
        '''
        Draw indices in [0, n) with replacement and equal probability.
        '''
        with self.lock:
            return self.rng.integers(0, n, size)


if __name__ == '__main__':
    pass
