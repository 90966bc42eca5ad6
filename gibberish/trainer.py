#!/usr/bin/env python3
from logging import getLogger
from math import log

from .config import DEFAULT_SMOOTHING
from .errors import (
    ConfigurationError,
    EmptyCorpusError,
    IndistinguishableClassesError,
    InsufficientExamplesError,
)
from .model import Model
from .scorer import score


logger = getLogger(__name__)


def build_transition_matrix(alphabet, corpus, smoothing=DEFAULT_SMOOTHING):
    '''
    Builds the matrix of log probabilities of one character following
    another, as seen in the corpus. Every pair starts out with `smoothing`
    occurrences, so pairs the corpus never shows are unlikely but possible.
    '''
    corpus = list(corpus)

    if not corpus:
        raise EmptyCorpusError('Training function is missing a necessary corpus.')

    if smoothing <= 0:
        raise ConfigurationError(f'The smoothing count must be positive, not {smoothing!r}.')

    k = len(alphabet)
    counts = [[smoothing for _ in range(k)] for _ in range(k)]
    transition_count = 0

    # We count every transition within the normalized lines.
    for line in corpus:
        for a, b in alphabet.transitions(line):
            counts[a][b] += 1
            transition_count += 1

    logger.debug(
        'Counted %d transitions across %d lines for a %d character alphabet',
        transition_count, len(corpus), k
    )

    # Then each row is converted from occurrences into log probabilities.
    sequences = []

    for row in counts:
        total = float(sum(row))

        if total > 0:
            sequences.append(tuple(log(count / total) for count in row))
        else:
            sequences.append(tuple(0.0 for _ in row))

    return tuple(sequences)


def calibrate_threshold(alphabet, sequences, known_good, known_bad):
    '''
    Places the threshold halfway between the worst scoring good example and
    the best scoring bad example.
    '''
    known_good = list(known_good)
    known_bad = list(known_bad)

    if not known_good or not known_bad:
        raise InsufficientExamplesError(
            'Training function needs good and bad examples to set threshold.'
        )

    min_good = min(score(alphabet, sequences, text) for text in known_good)
    max_bad = max(score(alphabet, sequences, text) for text in known_bad)

    if min_good < max_bad:
        logger.warning(
            'Calibration failed: worst good score %.6g is below best bad score %.6g',
            min_good, max_bad
        )
        raise IndistinguishableClassesError(min_good, max_bad)

    threshold = (min_good + max_bad) / 2

    logger.info(
        'Calibrated threshold %.6g (worst good %.6g, best bad %.6g)',
        threshold, min_good, max_bad
    )

    return threshold


def train(alphabet, corpus, known_good, known_bad, smoothing=DEFAULT_SMOOTHING):
    """Return a new trained model, leaving any existing model alone."""
    sequences = build_transition_matrix(alphabet, corpus, smoothing=smoothing)
    threshold = calibrate_threshold(alphabet, sequences, known_good, known_bad)

    return Model(alphabet=alphabet, sequences=sequences, threshold=threshold)
