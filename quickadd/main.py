import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .logs import configure_logging
from .routers import health, parse, suggestions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("quickadd parser service starting (env=%s)", settings.app_env)
    yield


app = FastAPI(title="Quick Add - Task Parser", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(parse.router, prefix="/parse", tags=["parse"])
app.include_router(suggestions.router, prefix="/suggestions", tags=["suggestions"])


@app.get("/")
def root():
    return {"ok": True, "service": "quickadd", "version": __version__}
