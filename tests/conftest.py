from pathlib import Path

import pytest

from gibberish import Alphabet, GibberishDetector


DATA_PATH = Path(__file__).parent / 'data'


def read_lines(name):
    with open(DATA_PATH / name, 'r') as file:
        return [line.strip() for line in file if line.strip()]


@pytest.fixture(scope='session')
def corpus():
    return read_lines('dictionary.txt')


@pytest.fixture(scope='session')
def known_good():
    return read_lines('good.txt')


@pytest.fixture(scope='session')
def known_bad():
    return read_lines('bad.txt')


@pytest.fixture
def alphabet():
    return Alphabet()


@pytest.fixture
def trained(corpus, known_good, known_bad):
    detector = GibberishDetector(use_default=False)
    detector.train(corpus, known_good, known_bad)

    return detector
