from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardshelf.api import grouping_router, health_router
from cardshelf.config import settings
from cardshelf.models.failure import KnownError

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardshelf"),
    debug=settings.debug,
)

app.include_router(grouping_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Return known failures in the ApiResponse envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )
