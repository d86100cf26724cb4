# Copyright (c) 2013-2025 NASK. All rights reserved.

import logging


def get_logger(name):
    """
    Get the logger for the given (module) name.

    Each *paramschema* module that logs anything does so through its
    own ``LOGGER = get_logger(__name__)``.  The package does not
    configure any handlers: that is left to the application.

    >>> get_logger('paramschema.engine').name
    'paramschema.engine'
    """
    return logging.getLogger(name)
