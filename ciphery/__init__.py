#!/usr/bin/env python3
import json
from .log import logger, set_level


__version__ = '0.1.0'


class Config:

    def __init__(self):
        self.raw = {
            "algorithm": "caesar",
            "key": None,
            "loglevel": "INFO",
        }
        self._apply()

    def _apply(self):
        for key in self.raw:
            setattr(self, key, self.raw[key])

    def load(self, path):
        logger.debug('Loading config {}'.format(path))
        with open(path, encoding='utf-8') as f:
            _cfg = json.load(f)
        if not isinstance(_cfg, dict):
            raise ValueError('config {} must be a JSON object'.format(path))
        self.raw.update(_cfg)
        self._apply()
        set_level(self.loglevel)


config = Config()
