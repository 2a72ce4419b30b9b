import platform

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from excatalog import __version__
from excatalog.models import Catalog
from excatalog.routes.exercise import get_catalog
from excatalog.settings import settings
from excatalog.utils.dates import now

router = APIRouter()

BUILD_TIME = now()


@router.get("/healthz", response_class=JSONResponse)
def healthz():
    return {"status": "ok"}


@router.get("/meta")
def get_meta(catalog: Catalog = Depends(get_catalog)):
    return {
        "app_name": settings.PROJECT_NAME,
        "version": __version__,
        "build_time": BUILD_TIME,
        "python_version": platform.python_version(),
        "environment": settings.ENV,
        "catalog_size": len(catalog),
        "catalog_built_at": catalog.built_at,
    }
