#!/usr/bin/env python3
'''
Measurement model for landmark points observed in the robot frame.
'''

import math

import numpy as np

from data_association import find_nearest_landmark
from errors import InvalidParameter


def transform_observation(x, y, theta, ox, oy):
    '''
    Express an observation (ox, oy) from the robot frame in the map frame,
    for a robot at pose (x, y, theta). Rotation by theta, then translation.
    '''
    cos_theta = math.cos(theta)
    sin_theta = math.sin(theta)
    x_map = x + cos_theta*ox - sin_theta*oy
    y_map = y + sin_theta*ox + cos_theta*oy
    return x_map, y_map


class MeasurementModel():
    def __init__(self, std_landmark, associator=find_nearest_landmark):
        '''
        Input:
            std_landmark: landmark measurement standard deviation
                          [sigma_x, sigma_y], both strictly positive.
            associator: callable (x, y, landmarks) -> Landmark matching a
                        map frame point, nearest neighbour by default.
        '''
        if len(std_landmark) != 2:
            raise InvalidParameter(
                "std_landmark needs 2 values [sigma_x, sigma_y], got {}".format(len(std_landmark)))
        sigma_x, sigma_y = float(std_landmark[0]), float(std_landmark[1])
        if not (sigma_x > 0 and sigma_y > 0):
            raise InvalidParameter(
                "std_landmark must be strictly positive, got {}".format(list(std_landmark)))
        self.sigma_x = sigma_x
        self.sigma_y = sigma_y
        self.associator = associator
        self.normalizer = 1.0 / (2 * np.pi * sigma_x * sigma_y)
        self.log_normalizer = -math.log(2 * np.pi * sigma_x * sigma_y)


    def compute_exponent(self, x_map, y_map, landmark):
        dx = x_map - landmark.x
        dy = y_map - landmark.y
        return dx**2 / (2*self.sigma_x**2) + dy**2 / (2*self.sigma_y**2)


    def compute_likelihood(self, x_map, y_map, landmark):
        '''
        Bivariate Gaussian density of the map frame point around the landmark,
        with independent axes.

        A single factor underflows to 0.0 when the exponent passes ~745,
        i.e. about 38.6 sigma away on one axis.
        '''
        return self.normalizer * math.exp(-self.compute_exponent(x_map, y_map, landmark))


    def compute_log_likelihood(self, x_map, y_map, landmark):
        return self.log_normalizer - self.compute_exponent(x_map, y_map, landmark)


    def observation_log_weight(self, particle, observations, candidates):
        '''
        Log of the importance factor of a particle for a set of observations,
        taken as conditionally independent given the pose. Summing logs
        neither overflows nor underflows.

        Input:
            particle: Particle() with the hypothesized pose.
            observations: LandmarkObservation list in the robot frame.
            candidates: ordered landmarks eligible for matching.
        Output:
            log_weight: sum of the observation log likelihoods.
            matches: matched Landmark for each observation.
        '''
        log_weight = 0.0
        matches = []
        for obs in observations:
            x_map, y_map = transform_observation(
                particle.x, particle.y, particle.theta, obs.x, obs.y)
            landmark = self.associator(x_map, y_map, candidates)
            log_weight += self.compute_log_likelihood(x_map, y_map, landmark)
            matches.append(landmark)
        return log_weight, matches


    def observation_weight(self, particle, observations, candidates):
        '''
        Product of the observation likelihoods, see observation_log_weight.
        May be inf or 0.0 outside the float range.
        '''
        log_weight, matches = self.observation_log_weight(particle, observations, candidates)
        with np.errstate(over="ignore", under="ignore"):
            weight = float(np.exp(log_weight))
        return weight, matches


if __name__ == '__main__':
    pass
