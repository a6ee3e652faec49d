from ciphery.log import logger


__all__ = ['CipherError', 'InvalidInputError', 'InvalidKeyError',
           'MissingKeyError', 'HexCodingError', 'BaseCipher', 'CodecCipher']


class CipherError(ValueError):
    kind = 'other'

    def __init__(self, message=''):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return '{}: {}'.format(self.kind, self.message)


class InvalidInputError(CipherError):
    kind = 'invalid input'


class InvalidKeyError(CipherError):
    kind = 'invalid key'


class MissingKeyError(InvalidKeyError):
    kind = 'missing key'


class HexCodingError(CipherError):
    kind = 'hex coding error'


def to_bytes(text: str):
    """ UTF-8 bytes of the text, lone surrogates are not valid input """
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidInputError('text is not valid Unicode: {}'.format(e)) from e


def to_text(data: bytes, error=CipherError, what='decoding'):
    """ reinterpret bytes as UTF-8 text, raising ``error`` otherwise """
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise error('{} failed: {}'.format(what, e)) from e


class BaseCipher:
    """
    Every cipher follows these rules:
    1. the key is validated in __init__, a bad key raises InvalidKeyError
    2. instances hold no state between calls
    3. cipher.decode(cipher.encode(text)) == text
    """

    def encode(self, text: str):
        """
        :param text: input plain text
        :rtype: str
        """
        try:
            return self.do_encode(text)
        except CipherError:
            raise
        except (IndexError, ValueError) as e:
            logger.debug('{}.encode failed'.format(self.name), exc_info=True)
            raise CipherError('{}: {}'.format(self.name, e)) from e

    def decode(self, text: str):
        """
        :param text: input encoded text
        :rtype: str
        """
        try:
            return self.do_decode(text)
        except CipherError:
            raise
        except (IndexError, ValueError) as e:
            logger.debug('{}.decode failed'.format(self.name), exc_info=True)
            raise CipherError('{}: {}'.format(self.name, e)) from e

    def do_encode(self, text):
        raise NotImplementedError

    def do_decode(self, text):
        raise NotImplementedError

    @property
    def name(self):
        return self.__class__.__name__

    def __repr__(self):
        return '<{}>'.format(self.name)


class CodecCipher(BaseCipher):
    """
    CodecCipher is not really a cipher
    It just frames the UTF-8 bytes of the text in a printable alphabet
    """
    error = InvalidInputError

    def encode_bytes(self, data: bytes) -> str:
        raise NotImplementedError

    def decode_bytes(self, text: str) -> bytes:
        raise NotImplementedError

    def do_encode(self, text):
        return self.encode_bytes(to_bytes(text))

    def do_decode(self, text):
        return to_text(self.decode_bytes(text), self.error,
                       '{} decoding'.format(self.name))
