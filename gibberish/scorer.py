#!/usr/bin/env python3
from dataclasses import asdict, dataclass
from math import exp

from .errors import EmptyInputError, UntrainedModelError


@dataclass(frozen=True)
class Evaluation:
    is_gibberish: bool
    score: float
    threshold: float

    def to_dict(self):
        return asdict(self)


def _lookup(sequences, a, b):
    # Anything outside of the matrix counts as a neutral transition.
    if a < len(sequences) and b < len(sequences[a]):
        return sequences[a][b]

    return 0


def score(alphabet, sequences, text):
    '''
    This returns the average transition probability of the text, translated
    from log probabilities back to a linear value in (0, 1]. Texts with fewer
    than two characters have no transitions and score 1.
    '''
    log_probability = 0.0
    transition_count = 0

    for a, b in alphabet.transitions(text):
        log_probability += _lookup(sequences, a, b)
        transition_count += 1

    return exp(log_probability / max(transition_count, 1))


def evaluate(model, text, verbose=False):
    '''
    Tests the text against a trained model. Characters outside of the model's
    alphabet are allowed, but only the portions made of alphabet characters
    are evaluated.

    Returns True when the text is gibberish, or an `Evaluation` when
    `verbose` is set.
    '''
    if model is None or not model.sequences:
        raise UntrainedModelError(
            'No training data has been provided. Load a cached model or train '
            'a new model before running evaluate.'
        )

    if not model.alphabet.normalize(text):
        raise EmptyInputError('No candidate text was provided.')

    probability = score(model.alphabet, model.sequences, text)
    is_gibberish = probability <= model.threshold

    if verbose:
        return Evaluation(is_gibberish=is_gibberish, score=probability, threshold=model.threshold)

    return is_gibberish
