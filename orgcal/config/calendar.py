"""Calendar display and seeding settings."""

import os
from datetime import timedelta

from . import environment  # noqa: F401  (loads .env)

# Events without an end time last this long
DEFAULT_EVENT_DURATION = timedelta(hours=1)

# How many events a month-grid day shows before the "+ N more..." indicator
MAX_EVENTS_PER_DAY = int(os.getenv('MAX_EVENTS_PER_DAY', '3'))

# Window of daily demo events around today
DEMO_DATA_DAYS_BEFORE = int(os.getenv('DEMO_DATA_DAYS_BEFORE', '15'))
DEMO_DATA_DAYS_AFTER = int(os.getenv('DEMO_DATA_DAYS_AFTER', '45'))

# User id stamped on seeded rows
SYSTEM_USER_ID = 'admin'
