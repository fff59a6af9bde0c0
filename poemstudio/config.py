from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, AnyUrl
from dotenv import load_dotenv
import os

load_dotenv()


class Config(BaseModel):
    # Database
    DATABASE_URL: str
    DB_CREATE_ALL: bool
    DB_ECHO: bool

    # JWT (tokens are issued by the identity provider)
    JWT_SECRET: str
    JWT_ALG: str
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None

    # Logging
    LOG_LEVEL: str
    LOG_FILE: Optional[Path] = None

    # FastAPI
    FASTAPI_HOST: str
    FASTAPI_PORT: int


def load_config(env: Mapping[str, str] = os.environ) -> Config:
    return Config(
        DATABASE_URL=str(AnyUrl(env["DATABASE_URL"])),
        DB_CREATE_ALL=env.get("DB_CREATE_ALL", "false"),
        DB_ECHO=env.get("DB_ECHO", "false"),

        JWT_SECRET=env["JWT_SECRET"],
        JWT_ALG=env.get("JWT_ALG", "HS256"),
        JWT_ISSUER=env.get("JWT_ISSUER") or None,
        JWT_AUDIENCE=env.get("JWT_AUDIENCE") or None,

        LOG_LEVEL=env.get("LOG_LEVEL", "INFO"),
        LOG_FILE=env.get("LOG_FILE") or None,

        FASTAPI_HOST=env.get("FASTAPI_HOST", "0.0.0.0"),
        FASTAPI_PORT=env.get("FASTAPI_PORT", "8000"),
    )


config = load_config()

__all__ = ["config", "load_config", "Config"]
