# emojicopy/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__, config
from .catalog import catalog_router
from .pages import pages_router
from .pages import store as page_store
from .seed import seed_database

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    page_store.load()
    if config.SEED_ON_STARTUP:
        seed_database()
    yield


app = FastAPI(
    title="Emoji Copy",
    description=(
        "Searchable emoji catalog with click-to-copy counts and "
        "generated SEO landing pages."
    ),
    version=__version__,
    lifespan=lifespan,
)

app.include_router(catalog_router)
app.include_router(pages_router)


# 🔹 Quick liveness check
@app.get("/")
def health_check():
    return {"status": "ok", "message": "Emoji Copy live 🚀"}
