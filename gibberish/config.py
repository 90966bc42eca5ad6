#!/usr/bin/env python3
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ALPHABET = 'abcdefghijklmnopqrstuvwxyz '

DEFAULT_SMOOTHING = 10


class Settings(BaseSettings):
    '''
    Tunables for training and configuring a detector. Every field can be
    overridden from the environment with the `GIBBERISH_` prefix, for example
    `GIBBERISH_SMOOTHING=5`.
    '''
    model_config = SettingsConfigDict(env_prefix='GIBBERISH_')

    # The count every transition starts from, so unseen pairs never get a
    # probability of zero.
    smoothing: float = Field(default=DEFAULT_SMOOTHING, gt=0)

    # Used when a detector is built without a model and without an alphabet.
    alphabet: str = DEFAULT_ALPHABET


def get_settings():
    return Settings()
