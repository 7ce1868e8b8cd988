from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health, prayertimes
from core.db import init_db
from utils.config_loader import DEFAULT_CONFIG


def create_app(config: dict = None) -> FastAPI:
    config = config or DEFAULT_CONFIG

    app = FastAPI(
        title="Hawler Prayer Times",
        version="0.1.0"
    )
    app.state.config = config

    init_db(config)

    app.include_router(health.router)
    app.include_router(prayertimes.router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config["api"].get("cors_origins", []),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    return app
