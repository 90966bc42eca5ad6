#!/usr/bin/env python3
from .alphabet import Alphabet, normalize_alphabet # noqa: F401
from .config import DEFAULT_ALPHABET, DEFAULT_SMOOTHING, Settings, get_settings # noqa: F401
from .detector import DetectorState, GibberishDetector # noqa: F401
from .errors import ( # noqa: F401
    ConfigurationError,
    EmptyCorpusError,
    EmptyInputError,
    GibberishError,
    IndistinguishableClassesError,
    InsufficientExamplesError,
    InvalidAlphabetError,
    InvalidModelError,
    ModelMismatchError,
    TrainingError,
    UntrainedModelError,
    UsageError,
)
from .model import Model, import_model, load_default_model # noqa: F401
from .scorer import Evaluation, evaluate, score # noqa: F401
from .trainer import build_transition_matrix, calibrate_threshold, train # noqa: F401
