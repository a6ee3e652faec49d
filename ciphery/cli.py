#!/usr/bin/env python3
import sys
import logging
import argparse
from ciphery import __version__, config, logger
from ciphery.log import set_level
from ciphery.cipher import Algorithm, CipherError, InvalidInputError,\
    new_cipher


BANNER = '\n'.join([
    '',
    '=' * 58,
    '  *  C I P H E R Y    .    v{}'.format(__version__),
    '  A Lightweight Command-Line Encryption / Decryption Tool',
    '=' * 58,
])

ABOUT = 'A lightweight interactive command-line encryption/decryption tool.'

EXAMPLES = """\
examples:
    # Encrypt the text 'hello' using Caesar cipher with a shift of 3
    ciphery encrypt -t hello -a caesar -k 3

    # Decrypt the text 'khoor' using Caesar cipher with a shift of 3
    ciphery decrypt -t khoor -a caesar -k 3

    # XOR the content of a file, the output is hex
    ciphery encrypt -f notes.txt -a xor -k secret

    # Launch without any parameters to enter interactive mode
    ciphery
"""


def resolve_input_text(text=None, file_path=None):
    """
    Return the payload from the text argument or the whole file.
    Raises InvalidInputError when neither is given, OSError when
    the file can't be read.
    """
    if text is not None:
        logger.info('Input text: {}'.format(text))
        return text
    if file_path is not None:
        logger.info('Reading text from file: {}'.format(file_path))
        with open(file_path, encoding='utf-8') as f:
            return f.read()
    raise InvalidInputError('no text or file path provided')


def execute(algorithm, text, key=None, encrypt=True, write=print):
    """ run one transform and print its outcome, returns True on success """
    action, label = ('Encryption', 'Encrypted') if encrypt \
        else ('Decryption', 'Decrypted')
    try:
        cipher = new_cipher(algorithm, key)
        result = cipher.encode(text) if encrypt else cipher.decode(text)
    except CipherError as e:
        write('[error] {} failed:\n{}'.format(action, e))
        return False
    write('[result] {} text:\n{}'.format(label, result))
    return True


def handle(args, write=print):
    encrypt = args.command == 'encrypt'
    algorithm = args.algo or config.algorithm
    key = args.key if args.key is not None else config.key
    logger.info('{} mode...'.format('Encryption' if encrypt else 'Decryption'))
    logger.info('Algorithm: {}'.format(algorithm))
    try:
        text = resolve_input_text(args.text, args.file_path)
    except InvalidInputError:
        write('[error] No text or file path provided!')
        return 1
    except (OSError, UnicodeDecodeError) as e:
        write('[error] Failed to read file: {}'.format(e))
        return 1
    if key is not None:
        logger.info('Key used: {}'.format(key))
    return 0 if execute(algorithm, text, key, encrypt, write) else 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ciphery', description=ABOUT, epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(__version__))
    parser.add_argument('-c', '--config', help='path to JSON config file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='show debug logging')
    subparsers = parser.add_subparsers(dest='command')
    for name in ('encrypt', 'decrypt'):
        sub = subparsers.add_parser(name, help='{} a text'.format(name))
        source = sub.add_mutually_exclusive_group()
        source.add_argument('-t', '--text', help='text to {}'.format(name))
        source.add_argument('-f', '--file-path', dest='file_path',
                            help='read the text from this file')
        sub.add_argument('-a', '--algo',
                         choices=[a.value for a in Algorithm],
                         help='algorithm (default: {})'.format(
                             config.algorithm))
        sub.add_argument('-k', '--key', help='shift, keyword, key or rails')
    return parser


def main(argv=None, read=input, write=print):
    args = build_parser().parse_args(argv)
    if args.config:
        try:
            config.load(args.config)
        except (OSError, ValueError) as e:
            write('[error] Failed to load config: {}'.format(e))
            return 1
    if args.verbose:
        set_level(logging.DEBUG)
    if args.command is None:
        from ciphery.shell import Shell
        Shell(read, write).loop()
        code = 0
    else:
        code = handle(args, write)
    write('[info] Thanks for using Ciphery! Goodbye!\n')
    return code


if __name__ == '__main__':
    sys.exit(main())
