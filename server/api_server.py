"""FastAPI application entry point for archive_ai_bridge."""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.routers.ArchiveRouter import router as archive_router
from server.routers.SessionRouter import router as session_router
from services.archive.SessionRegistry import SessionRegistry
from services.archive.gateway.ArchiveGateway import ArchiveGateway
from shared.clients.llm.LLMClientManager import LLMClientManager
from shared.corpus.ArchiveCorpus import ArchiveCorpus, DEFAULT_CORPUS_PATH
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import setup_logging

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # when the app starts
    app.state.logging = logging
    app.state.helper_config = HelperConfig(logger=logging)
    helper_config = app.state.helper_config

    corpus_path = helper_config.get_string_val("ARCHIVE_CORPUS_PATH", default=DEFAULT_CORPUS_PATH)
    app.state.corpus = ArchiveCorpus.from_json_file(corpus_path)
    logging.info("Loaded %d document(s) from %s.", len(app.state.corpus), corpus_path)

    # the AI capability is decided once here and injected into the gateway
    llm_manager = LLMClientManager(helper_config=helper_config)
    capability = await llm_manager.do_boot(
        healthcheck=helper_config.get_bool_val("LLM_STARTUP_HEALTHCHECK", default=True)
    )
    app.state.llm_manager = llm_manager
    app.state.gateway = ArchiveGateway(helper_config=helper_config, capability=capability)
    app.state.session_registry = SessionRegistry(
        helper_config=helper_config,
        corpus=app.state.corpus,
        gateway=app.state.gateway,
    )

    # while the app is running...
    yield

    # when the app shuts down, close the LLM client
    logging.info("Shutting down — closing LLM client...")
    await llm_manager.close()
    logging.info("LLM client closed.")


app = FastAPI(
    title="archive_ai_bridge",
    description=(
        "Back-end of a browsable digital archive (diplomas, awards, publications). "
        "Serves the catalog filtered by category/year/tag, AI-backed semantic search "
        "with a literal keyword fallback, and on-demand translation of document text."
    ),
    version=app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(archive_router)
app.include_router(session_router)


if __name__ == "__main__":
    import uvicorn

    logging.info(
        "Starting archive_ai_bridge API Server v%s from root dir: %s on port 8000...",
        app_version,
        os.environ.get("ROOT_DIR", os.getcwd()),
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
