#!/usr/bin/env python3
import logging


__all__ = ['logger', 'set_level']


_formater = logging.Formatter('%(asctime)s %(levelname)s: %(message)s')
_handler = logging.StreamHandler()
_handler.setFormatter(_formater)
logger = logging.getLogger('ciphery')
logger.setLevel(logging.INFO)
logger.addHandler(_handler)
logger.propagate = False


def set_level(level):
    """ accepts a level number or a name such as 'debug' """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
