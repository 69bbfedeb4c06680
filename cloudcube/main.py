from fastapi import FastAPI

from cloudcube.config.logger import configure_logging, get_logger
from cloudcube.config.settings import settings

from cloudcube.cube.router import router as cube_router

configure_logging(level=settings.logging.level, fmt=settings.logging.format)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.title,
    description=settings.description,
    version=settings.version,
    debug=settings.debug,
)


@app.on_event("startup")
async def startup_event():
    logger.info("Starting %s v%s", settings.title, settings.version)


@app.get("/health", tags=["Main"])
async def root():
    return {"app": settings.title, "version": settings.version, "status": "running"}


app.include_router(cube_router)
