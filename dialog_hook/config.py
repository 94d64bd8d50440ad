"""
Centralized configuration for the dialog hook.
- Loads from environment variables and an optional YAML file.
- Provides typed settings via Pydantic models.
- Exposes helpers for logging and CORS.
"""
from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
import yaml

# Ensure .env is loaded early
load_dotenv()

CONFIG_PATH_ENV = "DIALOG_HOOK_CONFIG"
DEFAULT_CONFIG_PATH = "dialog_hook.yaml"


class CORSConfig(BaseModel):
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    allow_credentials: bool = True


class FastAPIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    workers: int = 1
    cors: CORSConfig = Field(default_factory=CORSConfig)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    slow_turn_threshold_ms: int = 500

    @field_validator("level")
    def _upper_level(cls, v: str) -> str:
        return v.upper()


class BotConfig(BaseModel):
    # requests for any other bot are rejected before reaching the core
    name: str = "JackSparrow"


class AppMeta(BaseModel):
    app_name: str = "Jack Sparrow Dialog Hook"
    environment: str = Field(default_factory=lambda: os.getenv("APP_ENV", "dev"))
    version: str = "1.1"


class Settings(BaseModel):
    meta: AppMeta = Field(default_factory=AppMeta)
    bot: BotConfig = Field(default_factory=BotConfig)
    fastapi: FastAPIConfig = Field(default_factory=FastAPIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _load_yaml_config(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError:
            return {}
    return loaded if isinstance(loaded, dict) else {}


def _env_override(cfg: dict) -> dict:
    """Override select fields from env; keep simple to avoid surprises."""
    for k_env, section, key in [
        ("APP_ENV", "meta", "environment"),
        ("BOT_NAME", "bot", "name"),
        ("LOG_LEVEL", "logging", "level"),
        ("HOOK_HOST", "fastapi", "host"),
        ("HOOK_PORT", "fastapi", "port"),
    ]:
        val = os.getenv(k_env)
        if val is not None:
            cfg.setdefault(section, {})[key] = val
    return cfg


def load_settings(path: Optional[str] = None) -> Settings:
    base_cfg = _load_yaml_config(path or os.getenv(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))
    merged = _env_override(base_cfg)
    # Pydantic will coerce nested dicts into typed models
    return Settings(**merged)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


# ---- Helpers ---------------------------------------------------------------

def configure_logging(settings: Settings) -> None:
    import logging
    import sys

    from .middleware.turn import TurnIdFilter

    console = logging.StreamHandler(sys.stdout)
    console.addFilter(TurnIdFilter())

    logging.basicConfig(
        level=settings.logging.level,
        format="%(asctime)s %(levelname)s %(name)s turn=%(turn_id)s - %(message)s",
        handlers=[console],
        force=True,
    )


def build_cors(settings: Settings):
    from fastapi.middleware.cors import CORSMiddleware

    def add(app):
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.fastapi.cors.allow_origins,
            allow_methods=settings.fastapi.cors.allow_methods,
            allow_headers=settings.fastapi.cors.allow_headers,
            allow_credentials=settings.fastapi.cors.allow_credentials,
        )
        return app

    return add
