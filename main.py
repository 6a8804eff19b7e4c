import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from env_folder.config import DEFAULT_ENV_PROD, DEFAULT_FOLDER, LoadConfig, RunMode
from services import env_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def config_from_env() -> LoadConfig:
    """Build the loader config from the host's own environment."""
    return LoadConfig(
        folder=os.getenv("ENV_FOLDER", DEFAULT_FOLDER),
        env_prod_filename=os.getenv("ENV_PROD_FILE", DEFAULT_ENV_PROD),
        env_local_path=os.getenv("ENV_LOCAL_FILE") or None,
    )


def detect_run_mode() -> RunMode:
    return RunMode.parse(os.getenv("APP_ENV"))


def create_app(
    config: Optional[LoadConfig] = None, mode: Optional[RunMode] = None
) -> FastAPI:
    """Create the app; env vars are applied in the lifespan before serving."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        run_mode = mode or detect_run_mode()
        folder = env_service.load_env_vars(config or config_from_env(), run_mode)
        logger.info("Env folder ready: %s", folder)
        app.state.run_mode = run_mode
        app.state.env_folder = folder
        yield

    app = FastAPI(title="Env Folder", lifespan=lifespan)

    @app.get("/health")
    def health(request: Request):
        folder = request.app.state.env_folder
        return {
            "ok": True,
            "mode": request.app.state.run_mode.value,
            "env_folder": str(folder) if folder is not None else None,
        }

    return app


app = create_app()
