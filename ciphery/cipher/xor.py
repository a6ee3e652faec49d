#!/usr/bin/env python3
from Crypto.Util.strxor import strxor
from .base import BaseCipher, InvalidKeyError, HexCodingError,\
    to_bytes, to_text
from .codec import Base16

__all__ = ['XOR']


class XOR(BaseCipher):
    """
    Repeating-key XOR over the UTF-8 bytes of the text,
    the ciphertext is framed as lowercase hex.

    A wrong key is only noticed when the XORed bytes are not valid UTF-8,
    otherwise decoding silently gives wrong text.
    """

    def __init__(self, key):
        if isinstance(key, str):
            # undecodable command line bytes come back as surrogates
            try:
                key = key.encode('utf-8', 'surrogateescape')
            except UnicodeEncodeError as e:
                raise InvalidKeyError(
                    'key is not valid Unicode: {}'.format(e)) from e
        if not isinstance(key, (bytes, bytearray)):
            raise InvalidKeyError('error type {} to initialize {}'.format(
                type(key).__name__, self.name))
        if not key:
            raise InvalidKeyError('key cannot be empty')
        self.key = bytes(key)
        self.codec = Base16()

    def keystream(self, length):
        repeat, remains = divmod(length, len(self.key))
        return self.key * repeat + self.key[:remains]

    def xor_codec(self, data):
        if not data:
            return b''
        result = strxor(data, self.keystream(len(data)))
        assert len(data) == len(result)
        return result

    def do_encode(self, text):
        return self.codec.encode_bytes(self.xor_codec(to_bytes(text)))

    def do_decode(self, text):
        data = self.codec.decode_bytes(text)
        return to_text(self.xor_codec(data), HexCodingError, 'XOR decoding')
