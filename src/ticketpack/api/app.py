"""HTTP interface: plan generation and PRD text extraction."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from ticketpack.config import load_config
from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import (
    ExtractionError,
    FileTooLargeError,
    GenerationFailed,
    InputValidationError,
    UnsupportedFileTypeError,
)
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.extraction import TextExtractor
from ticketpack.oracles import create_oracle
from ticketpack.sdk import TicketPack

_LOG = logging.getLogger(__name__)

PLAN_ERROR_CODE = "PLAN_GENERATION_FAILED"
UNKNOWN_PLAN_ERROR = "Unknown error generating plan."
UNKNOWN_EXTRACT_ERROR = "Failed to extract file text"


def _plan_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": PLAN_ERROR_CODE, "message": message}, status_code=status_code)


def _extract_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)


def create_app(config: TicketPackConfig | None = None, *, oracle: GenerationOracle | None = None) -> FastAPI:
    """Build the application.

    Args:
        config: Settings; loaded from the environment when omitted.
        oracle: Oracle override; by default one is created from *config* on first use.
    """
    settings = config or load_config()
    extractor = TextExtractor(settings)
    packs: list[TicketPack] = []

    def ticketpack() -> TicketPack:
        if not packs:
            packs.append(TicketPack(oracle=oracle or create_oracle(settings), config=settings))
        return packs[0]

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        for pack in packs:
            await pack.aclose()

    app = FastAPI(title="ticketpack", description="PRD to ticket pack generation", lifespan=lifespan)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/plan")
    async def generate_plan(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError:
            return _plan_error(400, "request body must be valid JSON")

        try:
            plan = await ticketpack().generate_plan(payload)
        except InputValidationError as exc:
            return _plan_error(400, str(exc))
        except GenerationFailed as exc:
            return _plan_error(502, exc.message)
        except Exception as exc:
            _LOG.exception("Unexpected plan generation failure")
            return _plan_error(500, str(exc) or UNKNOWN_PLAN_ERROR)
        return JSONResponse(plan.model_dump(mode="json", by_alias=True))

    @app.post("/api/extract")
    async def extract_text(file: UploadFile | None = File(default=None)) -> JSONResponse:
        if file is None:
            return _extract_error(400, "No file uploaded")

        try:
            if file.size is not None:
                extractor.check_size(file.size)
            data = await file.read(settings.max_file_bytes + 1)
            text = extractor.extract(data, file.filename or "upload", file.content_type)
        except FileTooLargeError as exc:
            return _extract_error(413, str(exc))
        except UnsupportedFileTypeError as exc:
            return _extract_error(400, str(exc))
        except ExtractionError as exc:
            return _extract_error(422, str(exc))
        except Exception as exc:
            _LOG.exception("Unexpected extraction failure")
            return _extract_error(500, str(exc) or UNKNOWN_EXTRACT_ERROR)
        return JSONResponse({"text": text})

    return app
