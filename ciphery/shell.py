#!/usr/bin/env python3
from ciphery import logger
from ciphery.cipher import Algorithm
from ciphery.cli import BANNER, execute, resolve_input_text


ACTIONS = ('Encrypt', 'Decrypt', 'Exit')
SOURCES = ('Terminal', 'File')


class Shell:
    """
    Interactive prompt loop.
    ``read`` behaves like input(), ``write`` like print(),
    EOFError or KeyboardInterrupt from ``read`` ends the loop.
    """

    def __init__(self, read=input, write=print):
        self.read = read
        self.write = write
        self.algorithms = list(Algorithm)

    def select(self, prompt, items, default=0):
        for i, item in enumerate(items, 1):
            self.write('  {}) {}'.format(i, item))
        while True:
            answer = self.read('? {} [{}]: '.format(prompt, default + 1))
            answer = answer.strip()
            if not answer:
                return default
            if answer.isdecimal() and 1 <= int(answer) <= len(items):
                return int(answer) - 1
            self.write('[warning] Please choose a number between 1 and {}.'
                       .format(len(items)))

    def ask(self, prompt):
        return self.read('? {}: '.format(prompt))

    def run_once(self):
        """ one round of the menu, returns False when the user exits """
        action = self.select('What would you like to do?', ACTIONS)
        if ACTIONS[action] == 'Exit':
            return False
        encrypt = action == 0
        verb = 'encrypt' if encrypt else 'decrypt'

        index = self.select('Choose an algorithm',
                            [a.title for a in self.algorithms])
        algorithm = self.algorithms[index]

        source = self.select('Where is the text?', SOURCES)
        if SOURCES[source] == 'Terminal':
            text = self.ask('Enter the text to {}'.format(verb))
        else:
            path = self.ask('Enter the file path of text to {}'.format(verb))
            path = path.strip().strip('"').strip("'")
            try:
                text = resolve_input_text(file_path=path)
            except (OSError, UnicodeDecodeError) as e:
                self.write("[error] Failed to read file '{}': {}".format(
                    path, e))
                return True

        key = None
        if algorithm.needs_key:
            key = self.ask('Enter the key (shift amount, keyword or rails)')

        self.write('')
        execute(algorithm, text, key, encrypt, self.write)
        self.write('')
        return True

    def loop(self):
        self.write(BANNER)
        self.write("Welcome to Ciphery's interactive mode!")
        self.write("Type your choices below. Select 'Exit' to quit.\n")
        while True:
            try:
                if not self.run_once():
                    break
            except (EOFError, KeyboardInterrupt):
                logger.debug('input closed, leaving interactive mode')
                self.write('')
                break
