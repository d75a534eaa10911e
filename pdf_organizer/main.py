"""
PDF Organizer - FastAPI application

Exposes the local-first topic search over HTTP:
- GET  /health      - liveness check
- POST /v1/search   - rank local documents, fall back to Google Scholar

Run:
    uvicorn pdf_organizer.main:app --port 8080
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, status
from pydantic import BaseModel, Field

from .config import Settings
from .logging_config import level_from_name, setup_logging
from .pipeline import OrganizerPipeline, SearchOutcome
from .search import SearchClientFactory, get_search_client

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


class SearchRequest(BaseModel):
    topic: str = Field(..., description="Free-text topic to search for")
    root: Optional[str] = Field(None, description="Directory to scan (default: SEARCH_ROOT)")


class LocalResultResponse(BaseModel):
    rank: int
    path: str
    name: str
    score: float
    percent: float


class OnlineResultResponse(BaseModel):
    title: str
    url: str
    snippet: str


class DecisionResponse(BaseModel):
    fallback_needed: bool
    top_score: float
    result_count: int
    reason: str


class SearchResponse(BaseModel):
    topic: str
    root: str
    paths_found: int
    corpus_size: int
    decision: DecisionResponse
    local_results: List[LocalResultResponse]
    online_searched: bool
    online_results: List[OnlineResultResponse]

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        return cls(
            topic=outcome.topic,
            root=outcome.root,
            paths_found=outcome.paths_found,
            corpus_size=outcome.corpus_size,
            decision=DecisionResponse(
                fallback_needed=outcome.decision.needed,
                top_score=outcome.decision.top_score,
                result_count=outcome.decision.result_count,
                reason=outcome.decision.reason,
            ),
            local_results=[
                LocalResultResponse(
                    rank=r.rank, path=r.doc_id, name=r.display_name,
                    score=r.score, percent=round(r.percent, 2)
                )
                for r in outcome.local_results
            ],
            online_searched=outcome.online_searched,
            online_results=[
                OnlineResultResponse(title=r.title, url=r.url, snippet=r.snippet)
                for r in outcome.online_results
            ],
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup, release the search client on shutdown"""
    settings = Settings.from_env()
    setup_logging(
        log_file=settings.log_file,
        console_level=level_from_name(settings.log_level),
        file_level=logging.DEBUG
    )
    logger.info(f"PDF Organizer API {APP_VERSION} starting (search_root={settings.search_root})")

    yield

    logger.info("Shutting down...")
    SearchClientFactory.cleanup()


app = FastAPI(
    title="PDF Organizer",
    description="Local-first topic search over PDFs with Google Scholar fallback",
    version=APP_VERSION,
    lifespan=lifespan,
)


def get_settings() -> Settings:
    return Settings.from_env()


def get_pipeline(settings: Settings = Depends(get_settings)) -> OrganizerPipeline:
    return OrganizerPipeline(settings, search_client=get_search_client(settings))


@app.get("/health")
async def health():
    return {"status": "healthy", "version": APP_VERSION}


@app.post("/v1/search", response_model=SearchResponse)
def search(request: SearchRequest, pipeline: OrganizerPipeline = Depends(get_pipeline)):
    """
    Rank documents under the root directory against the topic.

    Runs synchronously (CPU-bound scoring, blocking extraction and HTTP)
    in FastAPI's threadpool. The topic is scored exactly as sent;
    surrounding whitespace counts toward the phrase match.
    """
    if not request.topic.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic must not be empty")

    root = request.root or pipeline.settings.search_root
    if not Path(root).is_dir():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Directory not found: {root}")

    outcome = pipeline.run(request.topic, root=root)
    return SearchResponse.from_outcome(outcome)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
