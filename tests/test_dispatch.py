#!/usr/bin/env python3
from unittest import TestCase
from ciphery.cipher import Algorithm, ALL_CIPHERS, new_cipher, Caesar,\
    Rot13, Base64, Vigenere, XOR, RailFence, BaseCipher, CipherError,\
    InvalidInputError, InvalidKeyError, MissingKeyError, HexCodingError


class TestDispatch(TestCase):
    def test_all_selectable(self):
        self.assertEqual(set(ALL_CIPHERS), set(Algorithm))
        self.assertIs(ALL_CIPHERS[Algorithm.RAILFENCE], RailFence)

    def test_new_cipher(self):
        self.assertIsInstance(new_cipher('caesar', '3'), Caesar)
        self.assertIsInstance(new_cipher(Algorithm.ROT13), Rot13)
        self.assertIsInstance(new_cipher('BASE64'), Base64)
        self.assertIsInstance(new_cipher('vigenere', 'LEMON'), Vigenere)
        self.assertIsInstance(new_cipher('xor', 'key'), XOR)
        self.assertIsInstance(new_cipher('railfence', '3'), RailFence)

    def test_polymorphic(self):
        keys = {
            Algorithm.CAESAR: '3',
            Algorithm.VIGENERE: 'LEMON',
            Algorithm.XOR: 'secret',
            Algorithm.RAILFENCE: '3',
        }
        text = 'Attack at dawn, 世界!'
        for algorithm in Algorithm:
            cipher = new_cipher(algorithm, keys.get(algorithm))
            self.assertIsInstance(cipher, BaseCipher)
            self.assertEqual(cipher.decode(cipher.encode(text)), text)

    def test_missing_key(self):
        for algorithm in 'caesar', 'vigenere', 'xor', 'railfence':
            with self.assertRaises(MissingKeyError) as ctx:
                new_cipher(algorithm)
            self.assertIsInstance(ctx.exception, InvalidKeyError)
            self.assertEqual(ctx.exception.kind, 'missing key')

    def test_keyless(self):
        self.assertFalse(Algorithm.ROT13.needs_key)
        self.assertFalse(Algorithm.BASE64.needs_key)
        self.assertTrue(Algorithm.XOR.needs_key)
        self.assertEqual(new_cipher('rot13', 'ignored').shift, 13)

    def test_invalid_key(self):
        self.assertRaises(InvalidKeyError, new_cipher, 'railfence', '1')
        self.assertRaises(InvalidKeyError, new_cipher, 'vigenere', '')
        self.assertRaises(InvalidKeyError, new_cipher, 'xor', '')
        self.assertRaises(InvalidKeyError, new_cipher, 'caesar', 'abc')

    def test_unknown_algorithm(self):
        self.assertRaises(InvalidInputError, new_cipher, 'enigma', 'key')


class TestErrors(TestCase):
    def test_kinds(self):
        self.assertEqual(CipherError('x').kind, 'other')
        self.assertEqual(InvalidInputError('x').kind, 'invalid input')
        self.assertEqual(InvalidKeyError('x').kind, 'invalid key')
        self.assertEqual(HexCodingError('x').kind, 'hex coding error')

    def test_str(self):
        e = InvalidKeyError('key cannot be empty')
        self.assertEqual(str(e), 'invalid key: key cannot be empty')
        self.assertEqual(e.message, 'key cannot be empty')
        self.assertIsInstance(e, ValueError)

    def test_wrapped(self):
        class Broken(BaseCipher):
            def do_encode(self, text):
                return [][0]

            def do_decode(self, text):
                raise ValueError('bad')

        cipher = Broken()
        with self.assertRaises(CipherError) as ctx:
            cipher.encode('x')
        self.assertEqual(ctx.exception.kind, 'other')
        self.assertIsInstance(ctx.exception.__cause__, IndexError)
        self.assertRaises(CipherError, cipher.decode, 'x')

    def test_wrapped_logged(self):
        class Broken(BaseCipher):
            def do_encode(self, text):
                raise ValueError('bad')

        with self.assertLogs('ciphery', level='DEBUG') as logs:
            self.assertRaises(CipherError, Broken().encode, 'x')
        self.assertIn('Broken.encode failed', logs.output[0])

    def test_not_rewrapped(self):
        try:
            XOR('key').decode('zz')
        except HexCodingError as e:
            self.assertIs(type(e), HexCodingError)
        else:
            self.fail('HexCodingError not raised')
