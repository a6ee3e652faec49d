#!/usr/bin/env python3
from .base import BaseCipher, InvalidKeyError

__all__ = ['Vigenere']


def is_ascii_letter(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


class Vigenere(BaseCipher):
    """ https://en.wikipedia.org/wiki/Vigen%C3%A8re_cipher
    The key cursor only moves on ASCII letters, so spaces,
    punctuation and non-Latin text keep their place and don't use up the key
    """

    def __init__(self, key: str):
        if not isinstance(key, str):
            raise InvalidKeyError('error type {} to initialize {}'.format(
                type(key).__name__, self.name))
        if not key:
            raise InvalidKeyError('key cannot be empty')
        if not all(is_ascii_letter(c) for c in key):
            raise InvalidKeyError(
                'key must contain only ASCII letters, got {!r}'.format(key))
        self.key = key.upper().encode('ascii')
        self.shifts = tuple(k - ord('A') for k in self.key)

    def do_encode(self, text):
        return self.vigenere_codec(text, self.shifts)

    def do_decode(self, text):
        return self.vigenere_codec(text, tuple(26 - s for s in self.shifts))

    @staticmethod
    def vigenere_codec(text, shifts):
        result = []
        cursor = 0
        for c in text:
            if is_ascii_letter(c):
                base = ord('A') if c <= 'Z' else ord('a')
                shift = shifts[cursor % len(shifts)]
                cursor += 1
                c = chr((ord(c) - base + shift) % 26 + base)
            result.append(c)
        return ''.join(result)
