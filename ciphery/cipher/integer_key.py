#!/usr/bin/env python3
from .base import BaseCipher, InvalidKeyError

__all__ = ['Caesar', 'Rot13', 'RailFence']


class IntKeyCipher(BaseCipher):
    """ class that accepts one int value (or its decimal string) as key """
    key_name = 'key'

    def __init__(self, key=0):
        if isinstance(key, bool):
            raise InvalidKeyError('error type {} to initialize {}'.format(
                type(key).__name__, self.name))
        if isinstance(key, int):
            self.ikey = key
        elif isinstance(key, str):
            try:
                self.ikey = int(key.strip())
            except ValueError:
                raise InvalidKeyError(
                    '{} for {} cipher must be a number, got {!r}'.format(
                        self.key_name, self.name, key)) from None
        else:
            raise InvalidKeyError('error type {} to initialize {}'.format(
                type(key).__name__, self.name))


def shift_letter(c, shift):
    if 'a' <= c <= 'z':
        return chr((ord(c) - ord('a') + shift) % 26 + ord('a'))
    if 'A' <= c <= 'Z':
        return chr((ord(c) - ord('A') + shift) % 26 + ord('A'))
    return c


class Caesar(IntKeyCipher):
    """ https://en.wikipedia.org/wiki/Caesar_cipher
    Only ASCII letters are shifted, case is preserved
    """
    key_name = 'shift'

    def __init__(self, key=0):
        super().__init__(key)
        self.shift = self.ikey % 26

    def do_encode(self, text):
        return self.rotate(text, self.shift)

    def do_decode(self, text):
        return self.rotate(text, (26 - self.shift) % 26)

    @staticmethod
    def rotate(text, shift):
        return ''.join(shift_letter(c, shift) for c in text)


class Rot13(Caesar):
    """ Caesar with the shift fixed at 13, its own inverse """

    def __init__(self, key=None):
        super().__init__(13)


class RailFence(IntKeyCipher):
    """ https://en.wikipedia.org/wiki/Rail_fence_cipher
    We don't strip the non-ASCII here, every code point takes a position
    """
    key_name = 'rails'

    def __init__(self, key=2):
        super().__init__(key)
        if self.ikey < 2:
            raise InvalidKeyError(
                'Rail Fence rails must be >= 2, got {}'.format(self.ikey))
        self.numrails = self.ikey

    def do_encode(self, text):
        if len(text) <= 1:
            return text
        fence = [[] for _ in range(self.reach(len(text)))]
        for c, rail in zip(text, self.pattern(len(text))):
            fence[rail].append(c)
        return ''.join(c for rail in fence for c in rail)

    def do_decode(self, text):
        if len(text) <= 1:
            return text
        pattern = list(self.pattern(len(text)))
        counts = [0] * self.reach(len(text))
        for rail in pattern:
            counts[rail] += 1
        segments = []
        cursor = 0
        for count in counts:
            segments.append(iter(text[cursor:cursor + count]))
            cursor += count
        return ''.join(next(segments[rail]) for rail in pattern)

    def reach(self, length):
        """ rails actually visited by a text of this length """
        return max(2, min(self.numrails, length))

    def pattern(self, length):
        """ rail index of each position: 0, 1, .., n-1, n-2, .., 1, 0, 1, .. """
        numrails = self.reach(length)
        rails = list(range(numrails - 1)) \
            + list(range(numrails - 1, 0, -1))
        for n in range(length):
            yield rails[n % len(rails)]
