#!/usr/bin/env python3
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from json import dumps as to_json, loads as from_json
from logging import getLogger
from math import isfinite
from numbers import Real
from pathlib import Path

from .alphabet import Alphabet
from .errors import InvalidAlphabetError, InvalidModelError, ModelMismatchError


logger = getLogger(__name__)

DEFAULT_MODEL_PATH = Path(__file__).parent / 'data' / 'gibberish_model.json'


def _is_number(value):
    if not isinstance(value, Real) or isinstance(value, bool):
        return False

    # Integers too large for a float cannot be stored in the matrix either.
    try:
        return isfinite(float(value))
    except OverflowError:
        return False


@dataclass(frozen=True)
class Model:
    '''
    A trained model: the alphabet, the transition matrix laid out by the
    alphabet's charmap, and the calibrated threshold. Exported models can be
    imported by future detectors to skip training.
    '''
    alphabet: Alphabet
    sequences: tuple
    threshold: float

    def to_dict(self):
        return {
            'alphabet': self.alphabet.characters,
            'sequences': [list(row) for row in self.sequences],
            'threshold': self.threshold,
        }

    def dumps(self):
        return to_json(self.to_dict(), separators=(',', ':'))

    @classmethod
    def from_dict(this, value):
        if not isinstance(value, Mapping):
            raise InvalidModelError('This is not a valid model.')

        characters = value.get('alphabet')
        sequences = value.get('sequences')
        threshold = value.get('threshold')

        if not characters or not sequences or threshold is None:
            raise InvalidModelError('This is not a valid model.')

        if not isinstance(characters, str) or isinstance(sequences, (str, bytes)) \
                or not isinstance(sequences, Sequence):
            raise InvalidModelError('This is not a valid model.')

        if not _is_number(threshold) or threshold <= 0:
            raise InvalidModelError(f'This model\'s threshold is invalid: {threshold!r}')

        if len(characters) != len(sequences):
            raise ModelMismatchError("This model's alphabet does not match the stored sequences.")

        rows = []

        for row in sequences:
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InvalidModelError('This model\'s sequences must be rows of numbers.')

            if len(row) != len(characters):
                raise ModelMismatchError("This model's sequences are not square with its alphabet.")

            if not all(_is_number(cell) for cell in row):
                raise InvalidModelError('This model\'s sequences must be rows of numbers.')

            rows.append(tuple(float(cell) for cell in row))

        try:
            alphabet = Alphabet(characters)
        except InvalidAlphabetError as error:
            raise InvalidModelError(str(error)) from error

        # A stored alphabet that normalizes differently would shift the charmap
        # out from under the matrix.
        if alphabet.characters != characters:
            raise InvalidModelError(f'This model\'s alphabet is not normalized: {characters!r}')

        return this(alphabet=alphabet, sequences=tuple(rows), threshold=float(threshold))

    @classmethod
    def loads(this, serialized):
        try:
            value = from_json(serialized)
        except (ValueError, TypeError) as error:
            raise InvalidModelError('This is not a valid model.') from error

        return this.from_dict(value)


def import_model(value):
    '''
    Accepts either an exported model value or its serialized string form.
    '''
    if isinstance(value, Model):
        return value

    if isinstance(value, (str, bytes, bytearray)):
        return Model.loads(value)

    return Model.from_dict(value)


def load_default_model(path=DEFAULT_MODEL_PATH):
    with open(path, 'r') as file:
        model = Model.loads(file.read())

    logger.debug('Loaded the default model from %s', path)

    return model
