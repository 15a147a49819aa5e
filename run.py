import uvicorn
from ensgraph.config import settings
from ensgraph.logging_config import configure_logging

if __name__ == "__main__":
    # Start the API server
    configure_logging(settings.LOG_LEVEL)
    print(f"Starting API server on {settings.API_HOST}:{settings.API_PORT}...")
    uvicorn.run(
        "ensgraph.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )
