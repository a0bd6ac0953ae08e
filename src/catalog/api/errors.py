"""HTTP mapping for catalog domain errors.

Protean's handlers cover the generic cases (validation 400, not found 404).
A name collision is a conflict with existing state, so it gets a 409.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from catalog.product.exceptions import DuplicateNameError


async def _duplicate_name_handler(request: Request, exc: DuplicateNameError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": dict(exc.messages)})


def register_catalog_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(DuplicateNameError, _duplicate_name_handler)
