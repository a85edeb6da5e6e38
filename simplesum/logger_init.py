# -*- coding: utf-8 -*-
"""
Copyright simplesum developers
"""

import logging
import os
from datetime import datetime

from simplesum.config import config, dump_config

LOG_FORMAT = '%(module)15s %(asctime)s %(levelname)s %(message)s'


def logger_init(args=None):
    """Configure the root logger from the `log` section of the configuration.

    Returns the path of the log file, or None when logging to stderr only.
    """
    log_cfg = config(args).log
    logging.basicConfig(level=log_cfg.level, format=LOG_FORMAT, datefmt='%H:%M:%S')

    log_filename = None
    if log_cfg.to_file:
        os.makedirs(log_cfg.dir, exist_ok=True)
        log_filename = os.path.join(log_cfg.dir,
                                    log_cfg.prefix + datetime.now().strftime('%m%d%H%M%S'))
        handler = logging.FileHandler(log_filename)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        logging.getLogger().addHandler(handler)
    if log_cfg.dump_config:
        dump_config()
    return log_filename
