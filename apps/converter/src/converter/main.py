import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from radix_core.history import HistoryStore
from radix_core.session import ConversionSession
from radix_core.utils import set_time_locale

from .config import converter_settings, history_settings
from .logger import api_settings, logger, system_logger
from .routes.api import conversion_api

uptime_start = time.time()
app: FastAPI = None


def build_session() -> ConversionSession:
    """Open the history store from settings and load the saved history."""
    try:
        set_time_locale(converter_settings.locale)
    except ValueError as e:
        system_logger.warning(f"{e}; keeping the default time locale.")
    store = HistoryStore.from_settings(history_settings, logger)
    return ConversionSession(store, logger, settings=converter_settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.session = build_session()
    logger.info(
        f"History loaded from {history_settings.db_path} ({len(app.state.session.history)} records)."
    )
    yield
    logger.info("Converter API shutting down.")


try:
    app = FastAPI(
        title="Converter API",
        description="API for converting numerals between bases 2, 8, 10 and 16",
        version="1.0.0",
        lifespan=lifespan,
    )
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(conversion_api)
    logger.info("Converter API initialized.")

    @app.get("/")
    async def root() -> dict:
        return {
            "message": "Converter API is running.",
            "uptime_seconds": time.time() - uptime_start,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "uptime_seconds": time.time() - uptime_start}

except KeyboardInterrupt:
    logger.info("Shutting down Converter API due to keyboard interrupt.")
    raise

except Exception as e:
    logger.exception(
        f"Failed to initialize Converter API: {e}", exc_info=True, stack_info=True
    )
    raise e


def entry():
    """Entry point for running the Converter application."""
    import uvicorn

    uvicorn.run(
        "converter.main:app",
        host=api_settings.host,
        port=api_settings.port,
        log_level=api_settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    entry()
