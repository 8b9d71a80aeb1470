# -*- coding: utf-8 -*-
"""
HTTP surface for codeiter.

Run, e.g.:
  uvicorn codeiter.app.api:app --port 8000

POST /api/iterate  {"code": "...", "prompt": "..."}
  200 -> {"modifiedCode": "...", "explanation": "..."}
  400 -> {"error": "Code and prompt are required"}  (also for malformed bodies)
  500 -> {"error": "<configuration message>"} or {"error": "An unexpected error occurred"}
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from codeiter import __version__
from codeiter.config.settings import Settings
from codeiter.orchestration.code_iterator import CodeIterator, ConfigurationError
from codeiter.orchestration.iteration_types import IterationRequestError
from codeiter.utils.logging import SimpleLogger

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
REQUIRED_FIELDS_MESSAGE = "Code and prompt are required"


class IterateIn(BaseModel):
    code: Optional[str] = None
    prompt: Optional[str] = None


class IterateOut(BaseModel):
    modifiedCode: str
    explanation: str


def get_code_iterator() -> CodeIterator:
    return CodeIterator()


def create_app() -> FastAPI:
    SimpleLogger.configure(enabled=Settings.log_enabled(), level=Settings.log_level())
    app = FastAPI(title="codeiter", version=__version__)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        # Non-string fields, non-object bodies and malformed JSON all land here.
        SimpleLogger.warning(f"iterate API: rejected request body: {exc.errors()!r}")
        return JSONResponse(status_code=400, content={"error": REQUIRED_FIELDS_MESSAGE})

    @app.get("/health")
    def health():
        return {"status": "ok", "configured": bool(Settings.api_key())}

    @app.post("/api/iterate", response_model=IterateOut)
    def iterate(body: IterateIn, iterator: CodeIterator = Depends(get_code_iterator)):
        if not body.code or not body.prompt:
            return JSONResponse(status_code=400, content={"error": REQUIRED_FIELDS_MESSAGE})

        try:
            result = iterator.iterate(body.code, body.prompt)
        except IterationRequestError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        except ConfigurationError as exc:
            return JSONResponse(status_code=500, content={"error": str(exc)})
        except Exception as exc:
            SimpleLogger.error(f"Error in iterate API: {exc!r}")
            return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR_MESSAGE})

        return result.to_dict()

    return app


app = create_app()
