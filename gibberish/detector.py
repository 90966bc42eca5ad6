#!/usr/bin/env python3
from enum import Enum
from logging import getLogger

from . import scorer, trainer
from .alphabet import Alphabet
from .config import get_settings
from .errors import UntrainedModelError
from .model import import_model, load_default_model


logger = getLogger(__name__)


class DetectorState(Enum):
    UNCONFIGURED = 'unconfigured'
    ALPHABET_SET = 'alphabet-set'
    TRAINED = 'trained'


class GibberishDetector:
    '''
    Trains a cacheable model and detects gibberish in arbitrary character sets.

    With no arguments, the detector loads the bundled pretrained model. A
    cached model (as exported by `export_model`) can be passed in instead,
    or an `alphabet` to start from an untrained model over that alphabet.

    The trained state is held as a single immutable `Model`, so training or
    importing either replaces it entirely or leaves it alone.
    '''
    def __init__(self, model=None, alphabet=None, use_default=True, settings=None):
        self.settings = settings if settings is not None else get_settings()
        self._state = DetectorState.UNCONFIGURED
        self._alphabet = None
        self._model = None

        if model is not None:
            self.import_model(model)
        elif alphabet is not None:
            self.set_alphabet(alphabet)
        elif use_default:
            self._load(load_default_model())
        else:
            self.set_alphabet(self.settings.alphabet)

    @property
    def state(self):
        return self._state

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def model(self):
        return self._model

    @property
    def threshold(self):
        return self._model.threshold if self._model is not None else None

    def _load(self, model):
        # The alphabet and model are swapped together.
        self._alphabet, self._model = model.alphabet, model
        self._state = DetectorState.TRAINED

    def set_alphabet(self, characters):
        '''
        Loads a character set for training. Uppercase and lowercase
        characters are deduplicated first. If the effective alphabet changes,
        any trained model is discarded since it was built for another charmap.
        '''
        alphabet = Alphabet(characters)

        if alphabet == self._alphabet:
            return

        if self._model is not None:
            logger.info('Alphabet changed to %r, discarding the trained model', alphabet.characters)

        self._alphabet = alphabet
        self._model = None
        self._state = DetectorState.ALPHABET_SET

    def train(self, corpus, known_good, known_bad):
        '''
        Builds the transition matrix from `corpus` and calibrates the
        threshold from the known good and known bad samples. On failure the
        previous model, if any, stays in place.
        '''
        if self._alphabet is None:
            self.set_alphabet(self.settings.alphabet)

        self._load(trainer.train(
            self._alphabet,
            corpus,
            known_good,
            known_bad,
            smoothing=self.settings.smoothing
        ))

    def import_model(self, model):
        '''
        Imports a cached model to bypass training. Accepts the value returned
        by `export_model`, serialized or not.
        '''
        model = import_model(model)
        self._load(model)

        logger.info('Imported a model with a %d character alphabet', len(model.alphabet))

    def export_model(self, serialize=True):
        '''
        Exports the trained model for use by future detectors. By default the
        model is serialized to a JSON string; pass `serialize=False` for the
        plain value.
        '''
        model = self._require_model('You must train the model before exporting.')

        return model.dumps() if serialize else model.to_dict()

    def score(self, text):
        model = self._require_model('You must train or import a model before scoring.')

        return scorer.score(model.alphabet, model.sequences, text)

    def evaluate(self, text, verbose=False):
        return scorer.evaluate(self._model, text, verbose=verbose)

    def _require_model(self, message):
        if self._state is not DetectorState.TRAINED:
            raise UntrainedModelError(message)

        return self._model
