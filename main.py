import contextlib

from fastapi import FastAPI

from poemstudio.config import config
from poemstudio.db.session import create_all
from poemstudio.logging_config import setup_logging
from poemstudio.routers import register_routers


@contextlib.asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    if config.DB_CREATE_ALL:
        await create_all()
    yield


app = FastAPI(title="Poem Studio", lifespan=lifespan)
register_routers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.FASTAPI_HOST, port=config.FASTAPI_PORT)
