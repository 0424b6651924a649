#!/usr/bin/env python3
'''
Exceptions raised by the particle filter.
'''


class ParticleFilterError(Exception):
    '''
    Base class for every error raised by the filter.
    '''


class InvalidParameter(ParticleFilterError, ValueError):
    '''
    A standard deviation, time step or other argument is out of range.
    '''


class InvalidMap(ParticleFilterError, ValueError):
    '''
    Association was attempted against an empty landmark map.
    '''


class DegenerateWeights(ParticleFilterError):
    '''
    Every particle weight is zero, resampling has nothing to act on.
    '''


class UninitializedFilter(ParticleFilterError, RuntimeError):
    '''
    A filter phase was called before init() populated the particles.
    '''


if __name__ == '__main__':
    pass
