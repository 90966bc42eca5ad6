from math import exp, log

import pytest

from gibberish import (
    Alphabet,
    ConfigurationError,
    EmptyCorpusError,
    IndistinguishableClassesError,
    InsufficientExamplesError,
    build_transition_matrix,
    calibrate_threshold,
    score,
    train,
)


def test_matrix_is_square(alphabet, corpus):
    sequences = build_transition_matrix(alphabet, corpus)

    assert len(sequences) == len(alphabet)
    assert all(len(row) == len(alphabet) for row in sequences)


def test_matrix_rows_are_probability_distributions(alphabet, corpus):
    for row in build_transition_matrix(alphabet, corpus):
        assert sum(exp(cell) for cell in row) == pytest.approx(1.0)


def test_matrix_counts_with_smoothing():
    alphabet = Alphabet('ab')
    sequences = build_transition_matrix(alphabet, ['ab'], smoothing=10)

    assert sequences[0] == pytest.approx((log(10 / 31), log(11 / 31), log(10 / 31)))
    assert sequences[1] == pytest.approx((log(1 / 3),) * 3)
    assert sequences[2] == pytest.approx((log(1 / 3),) * 3)


def test_smoothing_changes_the_matrix(alphabet, corpus):
    assert build_transition_matrix(alphabet, corpus, smoothing=1) != build_transition_matrix(alphabet, corpus)


def test_unseen_transitions_are_finite(alphabet):
    sequences = build_transition_matrix(alphabet, ['aaaa'])

    assert all(cell < 0 for row in sequences for cell in row)


@pytest.mark.parametrize('smoothing', [0, -1])
def test_smoothing_must_be_positive(alphabet, corpus, smoothing):
    with pytest.raises(ConfigurationError):
        build_transition_matrix(alphabet, corpus, smoothing=smoothing)


@pytest.mark.parametrize('corpus', [[], (), iter([])])
def test_empty_corpus(alphabet, corpus):
    with pytest.raises(EmptyCorpusError):
        build_transition_matrix(alphabet, corpus)


def test_threshold_lies_between_classes(alphabet, corpus, known_good, known_bad):
    sequences = build_transition_matrix(alphabet, corpus)
    threshold = calibrate_threshold(alphabet, sequences, known_good, known_bad)

    min_good = min(score(alphabet, sequences, text) for text in known_good)
    max_bad = max(score(alphabet, sequences, text) for text in known_bad)

    assert max_bad <= threshold <= min_good
    assert threshold == pytest.approx((min_good + max_bad) / 2)


@pytest.mark.parametrize('known_good,known_bad', [
    ([], ['kjdjksdf']),
    (['john smith'], []),
    ([], []),
])
def test_missing_examples(alphabet, corpus, known_good, known_bad):
    sequences = build_transition_matrix(alphabet, corpus)

    with pytest.raises(InsufficientExamplesError):
        calibrate_threshold(alphabet, sequences, known_good, known_bad)


def test_indistinguishable_classes(alphabet, corpus):
    sequences = build_transition_matrix(alphabet, corpus)

    with pytest.raises(IndistinguishableClassesError) as error:
        calibrate_threshold(alphabet, sequences, ['kjdjksdf'], ['john smith'])

    assert error.value.min_good < error.value.max_bad


def test_equal_scores_are_distinguishable(alphabet, corpus):
    sequences = build_transition_matrix(alphabet, corpus)
    threshold = calibrate_threshold(alphabet, sequences, ['john smith'], ['john smith'])

    assert threshold == pytest.approx(score(alphabet, sequences, 'john smith'))


def test_train_returns_a_model(alphabet, corpus, known_good, known_bad):
    model = train(alphabet, corpus, known_good, known_bad)

    assert model.alphabet == alphabet
    assert len(model.sequences) == len(alphabet)
    assert 0 < model.threshold < 1
