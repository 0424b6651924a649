import logging
import os


def get_logger(level=None, log_file=None):
    '''
    Configure the root logger for a filter run.

    Input:
        level: logging level name. Falls back to $LOGLEVEL, then INFO.
        log_file: optional path of a file that receives a copy of the log.
    Output:
        The configured root logger.
    '''
    if level is None:
        level = os.environ.get("LOGLEVEL", "INFO")
    logFormatter = logging.Formatter("[%(levelname)s]: %(message)s")
    rootLogger = logging.getLogger()
    # Avoid stacking handlers when called more than once
    for handler in list(rootLogger.handlers):
        if getattr(handler, "_particle_filter", False):
            rootLogger.removeHandler(handler)
            handler.close()
    streamHandler = logging.StreamHandler()
    streamHandler.setFormatter(logFormatter)
    streamHandler._particle_filter = True
    rootLogger.addHandler(streamHandler)
    if log_file is not None:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        fileHandler = logging.FileHandler("{0}".format(log_file))
        fileHandler.setFormatter(logFormatter)
        fileHandler._particle_filter = True
        rootLogger.addHandler(fileHandler)
    rootLogger.setLevel(level.upper() if isinstance(level, str) else level)
    return rootLogger
