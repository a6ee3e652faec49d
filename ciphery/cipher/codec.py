#!/usr/bin/env python3
import base64
from .base import CodecCipher, HexCodingError, InvalidInputError


__all__ = ['Base16', 'Base64']


class Base16(CodecCipher):
    """ lowercase hex framing, two digits per byte """
    error = HexCodingError

    def encode_bytes(self, data):
        return base64.b16encode(data).decode('ascii').lower()

    def decode_bytes(self, text):
        try:
            return base64.b16decode(text, casefold=True)
        except ValueError as e:
            raise HexCodingError('{} decoding failed: {}'.format(
                self.name, e)) from e


class Base64(CodecCipher):
    error = InvalidInputError

    def encode_bytes(self, data):
        return base64.b64encode(data).decode('ascii')

    def decode_bytes(self, text):
        try:
            return base64.b64decode(text, validate=True)
        except ValueError as e:
            raise InvalidInputError('{} decoding failed: {}'.format(
                self.name, e)) from e
