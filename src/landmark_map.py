#!/usr/bin/env python3
'''
Known landmark map in the global frame, and landmark observations in the
robot frame.
'''

import logging

import numpy as np
from scipy.spatial import cKDTree

from errors import InvalidMap, InvalidParameter

logger = logging.getLogger(__name__)


class Landmark():
    def __init__(self, id, x, y):
        self.id = id
        self.x = x
        self.y = y

    def __eq__(self, other):
        if not isinstance(other, Landmark):
            return NotImplemented
        return (self.id, self.x, self.y) == (other.id, other.x, other.y)

    def __hash__(self):
        return hash((self.id, self.x, self.y))

    def __repr__(self):
        return "Landmark(id={}, x={}, y={})".format(self.id, self.x, self.y)


class LandmarkObservation():
    '''
    A landmark point seen by the robot, in the robot's local frame.
    The id is assigned by the caller and not used for matching.
    '''
    def __init__(self, id, x, y):
        self.id = id
        self.x = x
        self.y = y

    def __repr__(self):
        return "LandmarkObservation(id={}, x={}, y={})".format(self.id, self.x, self.y)


class LandmarkMap():
    def __init__(self, landmarks):
        '''
        Input:
            landmarks: iterable of Landmark, kept in the given order.
                       The order decides ties in nearest neighbour search.
        '''
        self.landmark_list = tuple(landmarks)
        self.positions = np.array(
            [[landmark.x, landmark.y] for landmark in self.landmark_list],
            dtype=float).reshape(-1, 2)
        self.positions.setflags(write=False)
        self._tree = None
        logger.debug("Landmark map with {} landmarks".format(len(self.landmark_list)))

    @classmethod
    def from_array(cls, rows):
        '''
        Build a map from rows of [id, x, y].
        '''
        return cls(Landmark(int(row[0]), float(row[1]), float(row[2])) for row in rows)

    @classmethod
    def from_file(cls, path):
        '''
        Read a whitespace separated map file with one "x y id" line per
        landmark.
        '''
        data = np.loadtxt(path, ndmin=2)
        if data.size == 0:
            return cls([])
        if data.shape[1] != 3:
            raise InvalidMap(
                "map file {} must have 3 columns (x y id), found {}".format(path, data.shape[1]))
        return cls(Landmark(int(row[2]), float(row[0]), float(row[1])) for row in data)

    def __len__(self):
        return len(self.landmark_list)

    def __iter__(self):
        return iter(self.landmark_list)

    def __getitem__(self, index):
        return self.landmark_list[index]

    @property
    def ids(self):
        return [landmark.id for landmark in self.landmark_list]

    def require_landmarks(self):
        if len(self.landmark_list) == 0:
            raise InvalidMap("landmark map is empty")

    def within_range(self, x, y, sensor_range):
        '''
        Landmarks within sensor_range (inclusive) of the point (x, y), in
        map order.
        '''
        self.require_landmarks()
        if sensor_range < 0:
            raise InvalidParameter("sensor range must be non-negative, got {}".format(sensor_range))
        # Build the tree once, the map never changes
        if self._tree is None:
            self._tree = cKDTree(self.positions)
        indexes = self._tree.query_ball_point([x, y], sensor_range)
        return [self.landmark_list[index] for index in sorted(indexes)]


if __name__ == '__main__':
    pass
