#!/usr/bin/env python3

import logging

import numpy as np

from errors import InvalidParameter

logger = logging.getLogger(__name__)


class MotionModel():
    def __init__(self, random_source, yaw_rate_threshold=1e-6):
        '''
        Initialize motion model with the source used to draw process noise.
        Below yaw_rate_threshold the straight line update is used.
        '''
        self.random_source = random_source
        self.yaw_rate_threshold = yaw_rate_threshold


    def check_parameters(self, delta_t, std_pos):
        if not delta_t > 0:
            raise InvalidParameter("delta_t must be positive, got {}".format(delta_t))
        if len(std_pos) != 3:
            raise InvalidParameter("std_pos needs 3 values [x, y, theta], got {}".format(len(std_pos)))
        if any(not std >= 0 for std in std_pos):
            raise InvalidParameter("std_pos must be non-negative, got {}".format(list(std_pos)))


    # Velocity motion model, Probabilistic Robotics chapter 5
    def predict_pose(self, x, y, theta, delta_t, velocity, yaw_rate):
        '''
        Deterministic state X_t from state X_t-1 and control [v, w].
        '''
        if abs(yaw_rate) > self.yaw_rate_threshold:
            vw_ratio = velocity/yaw_rate
            x_est = x + (vw_ratio)*(np.sin(theta + yaw_rate*delta_t) - np.sin(theta))
            y_est = y + (vw_ratio)*(np.cos(theta) - np.cos(theta + yaw_rate*delta_t))
        else:
            # Avoid near zero denominators
            x_est = x + velocity*delta_t*np.cos(theta)
            y_est = y + velocity*delta_t*np.sin(theta)
        theta_est = theta + yaw_rate*delta_t
        return x_est, y_est, theta_est


    def sample_motion_model(self, particle, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move a particle by the control input and add process noise.

        Input:
            particle: Particle() object to be updated in place.
            delta_t: elapsed time [s].
            std_pos: process noise standard deviation [x, y, theta].
            velocity, yaw_rate: control input U_t.
        Output:
            None.
        '''
        x_est, y_est, theta_est = self.predict_pose(
            particle.x,
            particle.y,
            particle.theta,
            delta_t,
            velocity,
            yaw_rate)
        particle.x = float(x_est + self.random_source.gaussian(0.0, std_pos[0]))
        particle.y = float(y_est + self.random_source.gaussian(0.0, std_pos[1]))
        particle.theta = float(theta_est + self.random_source.gaussian(0.0, std_pos[2]))


if __name__ == '__main__':
    pass
