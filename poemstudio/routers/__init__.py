import importlib
import logging
import pkgutil

from fastapi import FastAPI, APIRouter

logger = logging.getLogger(__name__)


def register_routers(app: FastAPI) -> None:
    """Include the ``router`` of every module in this package, in name order."""
    package = importlib.import_module(__name__)
    modules = sorted(name for _, name, is_pkg in pkgutil.iter_modules(package.__path__) if not is_pkg)

    for module_name in modules:
        module = importlib.import_module(f"{__name__}.{module_name}")
        router = getattr(module, "router", None)
        if not isinstance(router, APIRouter):
            continue

        app.include_router(router)
        logger.debug("Registered router %s (%s)", module_name, router.prefix)
