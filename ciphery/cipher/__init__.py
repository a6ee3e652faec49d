from enum import Enum, unique
from .base import CipherError, InvalidInputError, InvalidKeyError,\
    MissingKeyError, HexCodingError, BaseCipher
from .codec import Base16, Base64
from .integer_key import Caesar, Rot13, RailFence
from .vigenere import Vigenere
from .xor import XOR


__all__ = ['CipherError', 'InvalidInputError', 'InvalidKeyError',
           'MissingKeyError', 'HexCodingError', 'BaseCipher',
           'Base16', 'Base64', 'Caesar', 'Rot13', 'RailFence',
           'Vigenere', 'XOR', 'Algorithm', 'ALL_CIPHERS', 'new_cipher']


@unique
class Algorithm(Enum):
    CAESAR = 'caesar'
    ROT13 = 'rot13'
    BASE64 = 'base64'
    VIGENERE = 'vigenere'
    XOR = 'xor'
    RAILFENCE = 'railfence'

    @property
    def needs_key(self):
        return self not in KEYLESS

    @property
    def title(self):
        return TITLES[self]


KEYLESS = {Algorithm.ROT13, Algorithm.BASE64}

TITLES = {
    Algorithm.CAESAR: 'Caesar',
    Algorithm.ROT13: 'ROT13',
    Algorithm.BASE64: 'Base64',
    Algorithm.VIGENERE: 'Vigenere',
    Algorithm.XOR: 'XOR',
    Algorithm.RAILFENCE: 'Rail Fence',
}

ALL_CIPHERS = {
    # substitution
    Algorithm.CAESAR: Caesar,
    Algorithm.ROT13: Rot13,
    Algorithm.VIGENERE: Vigenere,
    # codec
    Algorithm.BASE64: Base64,
    # symmetric
    Algorithm.XOR: XOR,
    # transposition
    Algorithm.RAILFENCE: RailFence,
}


def new_cipher(algorithm, key=None):
    """
    Build the cipher for ``algorithm`` (an Algorithm or its value).
    A missing key is rejected before the cipher is constructed,
    keyless algorithms ignore the key.
    """
    if isinstance(algorithm, str):
        algorithm = algorithm.lower()
    try:
        algorithm = Algorithm(algorithm)
    except ValueError:
        raise InvalidInputError('unknown algorithm {!r}'.format(
            algorithm)) from None
    if not algorithm.needs_key:
        return ALL_CIPHERS[algorithm]()
    if key is None:
        raise MissingKeyError(
            'no key provided for {} cipher'.format(algorithm.title))
    return ALL_CIPHERS[algorithm](key)
