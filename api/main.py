from __future__ import annotations

import hmac
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, Header, HTTPException, Request
from pydantic import BaseModel

from contracts.errors import ConfigurationError, MissingFileError
from orchestrator import WrapperExecutor

logger = logging.getLogger(__name__)

API_KEY_ENV = "WRAPPER_API_KEY"
PROJECT_ROOT_ENV = "WRAPPER_PROJECT_ROOT"
REQUEST_ID_HEADER = "x-request-id"


class ConfigurationRequest(BaseModel):
    properties_file: Optional[str] = None
    project_dir: Optional[str] = None


def _confine(raw_path: str) -> Path:
    """
    Map a requested path into ``WRAPPER_PROJECT_ROOT`` when one is configured.

    Relative paths are taken from the root; anything resolving outside it is
    refused with 403. Without a root every server path is accepted.
    """
    root_env = os.getenv(PROJECT_ROOT_ENV, "")
    if not root_env:
        return Path(raw_path)
    root = Path(root_env).resolve()
    candidate = (root / raw_path).resolve()
    if candidate != root and root not in candidate.parents:
        raise HTTPException(status_code=403, detail=f"Path is outside {PROJECT_ROOT_ENV}")
    return candidate


def _build_executor(req: ConfigurationRequest) -> WrapperExecutor:
    if (req.properties_file is None) == (req.project_dir is None):
        raise HTTPException(status_code=400, detail="Exactly one of 'properties_file' or 'project_dir' is required")
    if req.properties_file is not None:
        return WrapperExecutor.for_wrapper_properties_file(_confine(req.properties_file))
    return WrapperExecutor.for_project_directory(_confine(req.project_dir))


app = FastAPI(title="Wrapper Configuration API", version="0.1.0")


@app.middleware("http")
async def tag_request(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def _check_api_key(x_api_key: Optional[str]) -> None:
    expected = os.getenv(API_KEY_ENV, "")
    if expected and not hmac.compare_digest((x_api_key or "").encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Unauthorized")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/v1/configuration")
def configuration(
    request: Request, req: ConfigurationRequest, x_api_key: Optional[str] = Header(default=None)
) -> dict[str, Any]:
    _check_api_key(x_api_key)

    try:
        executor = _build_executor(req)
    except (ConfigurationError, MissingFileError) as exc:
        logger.info("configuration request failed: %s", exc)
        cause = exc.__cause__
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "cause": str(cause) if cause is not None else None},
        ) from exc

    return {
        "request_id": getattr(request.state, "request_id", None),
        "properties_file": str(executor.properties_file),
        "configuration": executor.configuration.to_dict(),
    }
