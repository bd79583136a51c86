# -*- coding: utf-8 -*-
#
# Copyright (c) 2025~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from .errors import ConfigError

DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_MAX_BODY_SIZE = 10 * 1024 * 1024


class Settings(BaseSettings):
    model_config = {
        'env_file': '.env',
        'env_ignore_empty': True,
        'extra': 'ignore',
    }

    port: int = Field(ge=1, le=65535)
    fetch_timeout: float = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)
    max_body_size: int = Field(default=DEFAULT_MAX_BODY_SIZE, gt=0)
    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = 'INFO'


def load_settings() -> Settings:
    '''
    Load settings from the environment and the optional `.env` file.

    Real environment variables take precedence over the file.
    '''
    try:
        return Settings() # type: ignore
    except ValidationError as e:
        missing = [str(err['loc'][0]).upper() for err in e.errors() if err['type'] == 'missing']
        if 'PORT' in missing:
            raise ConfigError('PORT is not found in the environment') from e
        raise ConfigError(f'invalid settings: {e}') from e
