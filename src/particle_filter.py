#!/usr/bin/env python3
'''
Monte Carlo localization against a known landmark map.
Sequential importance resampling: init, prediction, weight update and
resampling, see chapter 8 of Probabilistic Robotics by Sebastian Thrun,
Wolfram Burgard and Dieter Fox.
'''

import logging

import numpy as np

from data_association import find_nearest_landmark
from errors import InvalidParameter, UninitializedFilter
from measurement_model import MeasurementModel
from motion_model import MotionModel
from particle import Particle
from random_source import RandomSource
from resampling import Resampler

logger = logging.getLogger(__name__)

# Largest log weight whose exp stays finite, with some headroom
MAX_LOG_WEIGHT = np.log(np.finfo(float).max) - 1.0


class ParticleFilter():

    def __init__(self, num_particles=100, random_source=None,
                 yaw_rate_threshold=1e-6, degenerate_policy="uniform",
                 filter_by_range=False, record_associations=True,
                 associator=find_nearest_landmark):
        '''
        Initialize models. Particles are created by init().

        Input:
            num_particles: size of the population, fixed for the filter's life.
            random_source: RandomSource shared by every stochastic step.
            yaw_rate_threshold: below it the motion model goes straight.
            degenerate_policy: "uniform" or "raise", see Resampler.
            filter_by_range: only match landmarks within sensor range of
                             each particle.
            record_associations: store matched landmarks on each particle.
            associator: callable (x, y, landmarks) -> Landmark used to match
                        observations, nearest neighbour by default.
        '''
        if int(num_particles) < 1:
            raise InvalidParameter("num_particles must be at least 1, got {}".format(num_particles))
        self.N_particles = int(num_particles)
        if random_source is None:
            random_source = RandomSource()
        self.random_source = random_source
        self.motion_model = MotionModel(random_source, yaw_rate_threshold)
        self.resampler = Resampler(random_source, degenerate_policy)
        self.filter_by_range = filter_by_range
        self.record_associations = record_associations
        self.associator = associator
        # Values for the caller to hand to init/update_weights, set by from_parameters
        self.std_gps = None
        self.sensor_range = None
        self.std_landmark = None
        self.particles = []
        self._weights = np.zeros(0)
        self.is_initialized = False


    @classmethod
    def from_parameters(cls, parameters, random_source=None):
        '''
        Build a filter from a mapping as returned by config.load_parameters.
        '''
        if random_source is None:
            random_source = RandomSource(parameters.get("seed"))
        particle_filter = cls(
            num_particles=parameters["num_particles"],
            random_source=random_source,
            yaw_rate_threshold=parameters["yaw_rate_threshold"],
            degenerate_policy=parameters["degenerate_policy"],
            filter_by_range=parameters["filter_by_range"],
            record_associations=parameters["record_associations"],
            )
        particle_filter.std_gps = list(parameters["std_gps"])
        particle_filter.sensor_range = parameters["sensor_range"]
        particle_filter.std_landmark = list(parameters["std_landmark"])
        return particle_filter


    @property
    def weights(self):
        return self._weights.copy()


    def check_initialized(self):
        if not self.is_initialized:
            raise UninitializedFilter("call init() before running the filter")


    def init(self, x, y, theta, std):
        '''
        Sample every particle around the initial pose estimate.

        Input:
            x, y, theta: initial pose estimate (e.g. from GPS).
            std: standard deviation [std_x, std_y, std_theta].
        Output:
            None.
        '''
        if len(std) != 3:
            raise InvalidParameter("std needs 3 values [x, y, theta], got {}".format(len(std)))
        if any(not value >= 0 for value in std):
            raise InvalidParameter("std must be non-negative, got {}".format(list(std)))
        N = self.N_particles
        xs = self.random_source.gaussian(x, std[0], N)
        ys = self.random_source.gaussian(y, std[1], N)
        thetas = self.random_source.gaussian(theta, std[2], N)
        # Create particles, replacing any previous population
        self.particles = []
        for i in range(N):
            self.particles.append(Particle(i, float(xs[i]), float(ys[i]), float(thetas[i])))
        self._weights = np.ones(N)
        self.is_initialized = True
        logger.info("Initialized {} particles around ({:.3f}, {:.3f}, {:.3f})".format(
            N, x, y, theta))


    def prediction(self, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move every particle by the control input with process noise.

        Input:
            delta_t: time since the last prediction [s].
            std_pos: process noise standard deviation [x, y, theta].
            velocity: commanded linear velocity [m/s].
            yaw_rate: commanded yaw rate [rad/s].
        Output:
            None.
        '''
        self.check_initialized()
        self.motion_model.check_parameters(delta_t, std_pos)
        for particle in self.particles:
            self.motion_model.sample_motion_model(
                particle,
                delta_t,
                std_pos,
                velocity,
                yaw_rate)
        logger.debug("Predicted {} particles, dt={} v={} w={}".format(
            len(self.particles), delta_t, velocity, yaw_rate))


    def update_weights(self, sensor_range, std_landmark, observations, map_landmarks):
        '''
        Weight every particle by the likelihood of the observations.

        Input:
            sensor_range: sensor range [m], used when filter_by_range is set.
            std_landmark: landmark measurement standard deviation [x, y].
            observations: LandmarkObservation list in the robot frame.
            map_landmarks: LandmarkMap.
        Output:
            None.
        '''
        self.check_initialized()
        measurement_model = MeasurementModel(std_landmark, self.associator)
        if self.filter_by_range and not sensor_range >= 0:
            raise InvalidParameter("sensor_range must be non-negative, got {}".format(sensor_range))
        if len(observations) > 0:
            map_landmarks.require_landmarks()
        # Compute every weight first, nothing is applied on failure
        log_weights = np.zeros(len(self.particles))
        new_matches = []
        for i, particle in enumerate(self.particles):
            candidates = map_landmarks
            if self.filter_by_range and len(observations) > 0:
                in_range = map_landmarks.within_range(particle.x, particle.y, sensor_range)
                # Nothing in range, fall back on the whole map
                if in_range:
                    candidates = in_range
            log_weights[i], matches = measurement_model.observation_log_weight(
                particle, observations, candidates)
            new_matches.append(matches)
        # Weights only need to be proportional. Rescale by the largest one
        # when the raw product of densities would overflow.
        max_log_weight = log_weights.max()
        if max_log_weight > MAX_LOG_WEIGHT:
            logger.debug("Rescaling weights, largest log weight {:.1f}".format(max_log_weight))
            log_weights = log_weights - max_log_weight
        with np.errstate(under="ignore"):
            new_weights = np.exp(log_weights)
        for particle, weight, matches in zip(self.particles, new_weights, new_matches):
            particle.weight = float(weight)
            if self.record_associations:
                self.set_associations(
                    particle,
                    [landmark.id for landmark in matches],
                    [landmark.x for landmark in matches],
                    [landmark.y for landmark in matches])
        self._weights = new_weights
        logger.debug("Updated weights with {} observations, max weight {:.6g}".format(
            len(observations), new_weights.max()))


    def resample(self):
        '''
        Replace the population by a draw with replacement proportional to
        the weights of the last update.
        '''
        self.check_initialized()
        new_particles = self.resampler.resample(self.particles, self._weights)
        self.particles = new_particles
        self._weights = np.array([particle.weight for particle in self.particles])


    def best_particle(self):
        '''
        Particle with the highest weight, the first one on ties.
        '''
        self.check_initialized()
        weights = np.array([particle.weight for particle in self.particles])
        max_index = np.argmax(weights)
        return self.particles[max_index]


    def set_associations(self, particle, associations, sense_x, sense_y):
        '''
        Store, for one particle, the landmark ids it was matched with and
        their map frame coordinates.
        '''
        if not len(associations) == len(sense_x) == len(sense_y):
            raise InvalidParameter("associations, sense_x and sense_y lengths differ: {}, {}, {}".format(
                len(associations), len(sense_x), len(sense_y)))
        particle.associations = list(associations)
        particle.sense_x = list(sense_x)
        particle.sense_y = list(sense_y)


    def get_associations(self, particle):
        return " ".join(str(id) for id in particle.associations)


    def get_sense_coord(self, particle, coord):
        if coord == "X":
            values = particle.sense_x
        elif coord == "Y":
            values = particle.sense_y
        else:
            raise InvalidParameter("coord must be 'X' or 'Y', got {!r}".format(coord))
        return " ".join("{:g}".format(value) for value in values)


if __name__ == "__main__":
    pass
