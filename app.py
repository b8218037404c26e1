from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.document_endpoints import SETTINGS, router as document_router

    app = FastAPI(title="Document Server")

    # The editor runs in a browser, possibly from another origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(document_router)

    logger.info(
        "DOCUMENT SERVER: policy=%s document=%s root=%s atomic_writes=%s",
        SETTINGS.path_policy,
        SETTINGS.document_path,
        SETTINGS.document_root,
        SETTINGS.atomic_writes,
    )
    return app


app = create_app()
