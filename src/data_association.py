#!/usr/bin/env python3
'''
Nearest neighbour data association between map frame points and landmarks.
'''

from errors import InvalidMap


def find_nearest_landmark(x, y, landmarks):
    '''
    Find the landmark closest to the map frame point (x, y).

    Input:
        x, y: point in the map frame.
        landmarks: ordered sequence of Landmark (a LandmarkMap or a list).
    Output:
        The Landmark with the smallest squared distance. On ties the first
        one in the sequence is kept.
    '''
    nearest = None
    min_dist = None
    for landmark in landmarks:
        dist = (x - landmark.x)**2 + (y - landmark.y)**2
        # Strict comparison keeps the first of equally distant landmarks
        if min_dist is None or dist < min_dist:
            min_dist = dist
            nearest = landmark
    if nearest is None:
        raise InvalidMap("cannot associate against an empty landmark list")
    return nearest


def data_association(predicted, observations):
    '''
    Assign each observation to the closest predicted landmark.

    Input:
        predicted: ordered sequence of Landmark expected to be seen.
        observations: sequence of objects with x, y already in the map frame.
    Output:
        List of the matched Landmark for each observation, in order.
    '''
    return [find_nearest_landmark(obs.x, obs.y, predicted) for obs in observations]


if __name__ == '__main__':
    pass
