"""FastAPI application -- Praetorian entrypoint."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

import praetorian.deps as deps
from praetorian.adapters.registry import AdapterRegistry
from praetorian.api.audit import router as audit_router
from praetorian.api.formats import router as formats_router
from praetorian.api.validate import router as validate_router
from praetorian.audit.engine import AuditEngine
from praetorian.options import load_options
from praetorian.plugins.structure import StructurePlugin
from praetorian.validator.runner import Validator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: build the engines on startup, drop them on shutdown."""
    options = load_options()
    if os.environ.get("PRAETORIAN_DEV_MODE"):
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(options.log_level)
        if not isinstance(log_level, int):
            log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Praetorian starting with options: %s", options.model_dump())

    deps._options = options
    deps._registry = AdapterRegistry(logger=logging.getLogger("praetorian.adapters"))
    deps._validator = Validator(
        [StructurePlugin(logger=logging.getLogger("praetorian.plugins"))],
        strict=options.strict,
        logger=logging.getLogger("praetorian.validator"),
    )
    deps._audit_engine = AuditEngine(
        options.audit_categories,
        logger=logging.getLogger("praetorian.audit"),
    )
    logger.info("Audit categories: %s", ", ".join(options.audit_categories))

    yield

    deps._options = None
    deps._registry = None
    deps._validator = None
    deps._audit_engine = None


app = FastAPI(
    title="Praetorian",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(validate_router)
app.include_router(audit_router)
app.include_router(formats_router)
