"""Deployment environment of the calendar.

Import this before any module that reads settings from the environment: it
loads the nearest `.env` file (python-dotenv), so the API, the seeding
script and the tests all see the same calendar settings.

`ENVIRONMENT` is either 'development' (a local SQLite calendar) or
'production' (PostgreSQL from DATABASE_URL). Anything else runs as
development.

Usage:
    from orgcal.config.environment import ENVIRONMENT_NAME, IS_PRODUCTION_ENVIRONMENT
"""

import os
import logging
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ('development', 'production')

# Variables already set in the process win over the .env file
load_dotenv(find_dotenv(usecwd=True))

_requested = os.environ.get('ENVIRONMENT', '').strip().lower()
ENVIRONMENT_NAME = _requested if _requested in VALID_ENVIRONMENTS else 'development'
IS_PRODUCTION_ENVIRONMENT = ENVIRONMENT_NAME == 'production'

if _requested != ENVIRONMENT_NAME:
    logger.warning(
        f"ENVIRONMENT={_requested or '<unset>'} is not one of {', '.join(VALID_ENVIRONMENTS)}; "
        "running the calendar against the local development database."
    )

__all__ = ['ENVIRONMENT_NAME', 'IS_PRODUCTION_ENVIRONMENT', 'VALID_ENVIRONMENTS']
