import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from opengraph.core.config import settings
from opengraph.routers import router


# Initialize FastAPI application
app = FastAPI(
    title="OpenGraph Server",
    description="Extracts Open Graph metadata from web pages",
    version="1.0.0",
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.include_router(router, prefix="/api")


def run() -> None:
    """Run the API server with uvicorn"""
    # Set up logging first
    from opengraph.config.logging_config import setup_logging
    setup_logging()

    uvicorn.run(
        "opengraph.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
    )


if __name__ == "__main__":
    run()
