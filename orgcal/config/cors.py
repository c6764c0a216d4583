"""CORS configuration for the FastAPI application."""

import os

from .environment import IS_PRODUCTION_ENVIRONMENT

# CORS Origins configuration
ALLOWED_ORIGINS = {
    False: ["*"],  # Development - allow all
    True: [        # Production - restricted to the configured frontends
        origin.strip()
        for origin in os.getenv('CALENDAR_ALLOWED_ORIGINS', '').split(',')
        if origin.strip()
    ]
}

# CORS Methods configuration
ALLOWED_METHODS = [
    "GET",      # Month views and lookups
    "POST",     # Create, cancel and conflict checks
    "PUT",      # Edits
    "DELETE",   # Hard deletes
    "OPTIONS"   # Required for CORS preflight
]

# CORS Headers configuration
ALLOWED_HEADERS = [
    "Authorization",
    "Content-Type",
    "Accept",
]

CORS_CONFIG = {
    "allow_origins": ALLOWED_ORIGINS[IS_PRODUCTION_ENVIRONMENT],
    "allow_credentials": True,
    "allow_methods": ALLOWED_METHODS,
    "allow_headers": ALLOWED_HEADERS,
    "expose_headers": [],
    "max_age": 3600,
}
