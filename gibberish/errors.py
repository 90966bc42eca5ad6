#!/usr/bin/env python3
'''
Every failure the detector can report. They are grouped by cause, so calling
code can tell a bad configuration apart from bad training data or misuse.
'''


class GibberishError(Exception):
    pass


class ConfigurationError(GibberishError, ValueError):
    pass


class TrainingError(GibberishError):
    pass


class UsageError(GibberishError):
    pass


class InvalidAlphabetError(ConfigurationError):
    pass


class InvalidModelError(ConfigurationError):
    pass


class ModelMismatchError(InvalidModelError):
    pass


class EmptyCorpusError(TrainingError, ValueError):
    pass


class InsufficientExamplesError(TrainingError, ValueError):
    pass


class IndistinguishableClassesError(TrainingError):
    def __init__(self, min_good, max_bad):
        super().__init__(
            'Good content and gibberish are not sufficiently distinguishable '
            f'(worst good score {min_good:.6g} < best bad score {max_bad:.6g}).'
        )

        self.min_good = min_good
        self.max_bad = max_bad


class UntrainedModelError(UsageError, RuntimeError):
    pass


class EmptyInputError(UsageError, ValueError):
    pass
