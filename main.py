"""Main application entry point."""

from orgcal.config.environment import IS_PRODUCTION_ENVIRONMENT
from orgcal.api.app import app

if __name__ == "__main__":
    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - string reference so reload can re-import the app
        import uvicorn
        uvicorn.run(
            "orgcal.api.app:app",
            host="127.0.0.1",
            port=8000,
            reload=True,
            log_level="debug"
        )
    else:
        # Production mode - use string reference for proper multi-worker support
        import uvicorn
        uvicorn.run(
            "orgcal.api.app:app",  # String reference required for multiple workers
            host="0.0.0.0",
            port=8000,
            reload=False,
            workers=4,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
