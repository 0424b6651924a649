#!/usr/bin/env python3
'''
Particle with a hypothesized robot pose, its importance weight and the
landmark associations found for it in the last weight update.
'''


class Particle:
    def __init__(self, id, x, y, theta, weight=1.0):
        self.initialize(id, x, y, theta, weight)

    def initialize(self, id, x, y, theta, weight=1.0):
        self.id = id
        self.x = x
        self.y = y
        self.theta = theta
        self.weight = weight  # Importance weight, not normalized
        # Diagnostics, aligned by index
        self.associations = []
        self.sense_x = []
        self.sense_y = []

    def pose(self):
        return self.x, self.y, self.theta

    def copy(self):
        '''
        Independent copy, association lists included.
        '''
        particle = Particle(self.id, self.x, self.y, self.theta, self.weight)
        particle.associations = list(self.associations)
        particle.sense_x = list(self.sense_x)
        particle.sense_y = list(self.sense_y)
        return particle

    def __repr__(self):
        return "Particle(id={}, x={:.4f}, y={:.4f}, theta={:.4f}, weight={:.6g})".format(
            self.id, self.x, self.y, self.theta, self.weight)


if __name__ == '__main__':
    pass
