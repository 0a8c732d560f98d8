"""
FastAPI приложение для расчета раскладки
"""
import logging

from fastapi import FastAPI

from api.endpoints import api_router
from core.config import AppConfig
from utils.logger import setup_logging

config = AppConfig()

setup_logging(config.log_dir, logging.DEBUG if config.debug else logging.INFO)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Создание FastAPI приложения"""
    app = FastAPI(title=config.app_name, version=config.version)
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": config.version}

    logger.info(f"{config.app_name} {config.version} initialized")
    return app


app = create_app()
