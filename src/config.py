#!/usr/bin/env python3
'''
Filter parameters, with defaults that can be overridden from a YAML file.
'''

import copy
import logging

import yaml

from errors import InvalidParameter

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS = {
    # Population
    "num_particles": 100,
    "seed": None,
    # Motion model
    "yaw_rate_threshold": 1e-6,
    # Measurement model
    "sensor_range": 50.0,
    "filter_by_range": False,
    "std_gps": [0.3, 0.3, 0.01],     # [x, y, theta] used by init
    "std_landmark": [0.3, 0.3],      # [x, y]
    # Resampling
    "degenerate_policy": "uniform",
    # Diagnostics
    "record_associations": True,
}


def load_parameters(path=None, **overrides):
    '''
    Load the filter parameters.

    Input:
        path: optional YAML file with a mapping of parameter names.
        overrides: values that take precedence over the file.
    Output:
        dict with every key of DEFAULT_PARAMETERS.
    '''
    file_parameters = {}
    if path is not None:
        with open(path) as file:
            file_parameters = yaml.safe_load(file)
        if file_parameters is None:
            file_parameters = {}
        if not isinstance(file_parameters, dict):
            raise InvalidParameter(
                "parameter file {} must contain a mapping".format(path))
    parameters = {}
    for source in (file_parameters, overrides):
        unknown = set(source) - set(DEFAULT_PARAMETERS)
        if unknown:
            raise InvalidParameter("unknown parameters: {}".format(sorted(unknown)))
    for name, default in DEFAULT_PARAMETERS.items():
        value = overrides.get(name, file_parameters.get(name, copy.deepcopy(default)))
        parameters[name] = value
        logger.info("%-20s %s", name + ":", value)
    return parameters


if __name__ == '__main__':
    pass
