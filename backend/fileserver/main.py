from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .routes import build_router
from .utils.logging import logger, setup_logging


setup_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Fetch files from the host filesystem and stream them back as downloads.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(build_router())


@app.on_event("startup")
def on_startup():
    logger.info("Serving files from %s", settings.base_dir)


def run():
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
