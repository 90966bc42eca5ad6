#!/usr/bin/env python3
from regex import compile as RegEx

from .config import DEFAULT_ALPHABET
from .errors import InvalidAlphabetError


_WHITESPACE_PATTERN = RegEx(r'\s+')


def normalize_alphabet(characters):
    '''
    This lowercases and deduplicates the given characters. Runs of whitespace
    collapse into a single space, and a space is always included since it is
    the placeholder for every character outside of the alphabet.
    '''
    characters = _WHITESPACE_PATTERN.sub(' ', characters.lower()) + ' '

    # Dictionaries keep insertion order, so the first occurrence wins.
    return ''.join(dict.fromkeys(characters))


class Alphabet:
    '''
    An ordered set of unique characters, along with the character-to-index
    mapping (the "charmap") that every transition matrix is laid out by.
    '''
    def __init__(self, characters=DEFAULT_ALPHABET):
        normalized = normalize_alphabet(characters)

        if len(normalized) < 2:
            raise InvalidAlphabetError(f'This character set is invalid: {characters!r}')

        self._characters = normalized
        self._charmap = {character: index for index, character in enumerate(normalized)}

    @property
    def characters(self):
        return self._characters

    @property
    def charmap(self):
        return dict(self._charmap)

    def index(self, character):
        return self._charmap[character]

    def normalize(self, text):
        '''
        Lowercases the text and swaps every character outside of the alphabet
        for a space, so the surrounding characters keep their positions. Then
        whitespace is collapsed and trimmed.
        '''
        text = ''.join(
            character if character in self._charmap else ' '
            for character in text.lower()
        )

        return _WHITESPACE_PATTERN.sub(' ', text).strip()

    def transitions(self, text):
        """Yield (from, to) index pairs for each consecutive character of the normalized text."""
        indices = [self._charmap[character] for character in self.normalize(text)]

        return zip(indices, indices[1:])

    def __contains__(self, character):
        return character in self._charmap

    def __iter__(self):
        return iter(self._characters)

    def __len__(self):
        return len(self._characters)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented

        return self._characters == other._characters

    def __hash__(self):
        return hash(self._characters)

    def __str__(self):
        return self._characters

    def __repr__(self):
        return f'Alphabet({self._characters!r})'
