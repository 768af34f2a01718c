from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import declensions, languages, scenarios, sessions
from api.deps import get_language_module
from core.config import settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from core.errors import register_error_handlers

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Case Messenger API starting up")

    # Build declensions and scenarios now so corrupt seed content stops startup
    module = get_language_module()
    log.info(
        "content_ready",
        language=module.code,
        declensions=len(module.get_declension_registry()),
        scenarios=len(module.get_scenarios()),
    )

    yield

    log.info("shutdown", message="Case Messenger API shutting down")


app = FastAPI(
    title="Case Messenger API",
    description="Old English noun declension practice: build sentences from declined nouns and check them against target case patterns",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Middleware (order matters: last added = first executed)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(languages.router, prefix="/api/languages", tags=["languages"])
app.include_router(declensions.router, prefix="/api/declensions", tags=["declensions"])
app.include_router(scenarios.router, prefix="/api/scenarios", tags=["scenarios"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
