# run.py
import uvicorn

from core.config import AppConfig

if __name__ == "__main__":
    config = AppConfig()

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
