#!/usr/bin/env python3
"""Start the API server with uvicorn using the application settings."""

import os

import uvicorn

from producthub.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "producthub.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=settings.log_level.lower(),
        reload=settings.is_development,
    )
