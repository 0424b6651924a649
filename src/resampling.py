#!/usr/bin/env python3
'''
Importance resampling of a particle population.
'''

import logging

import numpy as np

from errors import DegenerateWeights, InvalidParameter

logger = logging.getLogger(__name__)

DEGENERATE_POLICIES = ("uniform", "raise")


def effective_sample_size(weights):
    '''
    Effective number of particles 1 / sum(w^2) of the normalized weights.
    Zero for an all zero weight vector.
    '''
    weights = np.asarray(weights, dtype=float)
    if not weights.max(initial=0.0) > 0:
        return 0.0
    weights = weights / weights.max()
    total = weights.sum()
    normalized = weights / total
    return 1.0 / np.sum(normalized**2)


class Resampler():
    def __init__(self, random_source, degenerate_policy="uniform"):
        '''
        Input:
            random_source: RandomSource used for the categorical draws.
            degenerate_policy: what to do when every weight is zero.
                "uniform": warn and resample with equal probability.
                "raise": raise DegenerateWeights and leave the caller's
                         particles untouched.
        '''
        if degenerate_policy not in DEGENERATE_POLICIES:
            raise InvalidParameter("degenerate_policy must be one of {}, got {!r}".format(
                DEGENERATE_POLICIES, degenerate_policy))
        self.random_source = random_source
        self.degenerate_policy = degenerate_policy


    def check_weights(self, particles, weights):
        if len(weights) != len(particles):
            raise InvalidParameter("{} weights for {} particles".format(
                len(weights), len(particles)))
        if not np.all(np.isfinite(weights)):
            raise InvalidParameter("weights must be finite")
        if np.any(weights < 0):
            raise InvalidParameter("weights must be non-negative")


    def resample(self, particles, weights):
        '''
        Draw a new population with replacement, each slot picking a particle
        with probability proportional to its weight.

        Input:
            particles: current list of Particle.
            weights: weight vector aligned with particles.
        Output:
            New list of copied particles with the same length.
        '''
        # Snapshot, the draws must not see later changes
        weights = np.array(weights, dtype=float)
        self.check_weights(particles, weights)
        N = len(particles)
        if N == 0:
            return []
        if not weights.max() > 0:
            if self.degenerate_policy == "raise":
                raise DegenerateWeights(
                    "all {} particle weights are zero".format(N))
            logger.warning("All particle weights are zero, resampling uniformly")
            new_indexes = self.random_source.uniform_indices(N, N)
        else:
            logger.debug("Effective number of particles: {:.2f}".format(
                effective_sample_size(weights)))
            new_indexes = self.random_source.weighted_indices(weights, N)
        # Copy, so the old population can be dropped without aliasing
        new_particles = []
        for index in new_indexes:
            new_particles.append(particles[index].copy())
        return new_particles


if __name__ == '__main__':
    pass
