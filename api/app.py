# Path: api/app.py
# Purpose: Expose a FastAPI application for cross-entity search.
# Layer: api.
# Details: Provides health checks and a search endpoint delegating to the core pipeline.

from __future__ import annotations

from typing import Any, Dict, Optional

from core.search.pipeline import SearchPipeline


def create_app(pipeline: Optional[SearchPipeline] = None):  # type: ignore[override]
    """Create a FastAPI app instance configured with the provided search pipeline."""

    from fastapi import FastAPI, HTTPException, Query

    app = FastAPI(title="CRM Search API", version="0.1.0")

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.get("/search")
    def search(q: str = "", limit: Optional[int] = Query(default=None, ge=0)) -> Dict[str, Any]:
        """Match deals and contacts against the query text."""

        if pipeline is None:
            raise HTTPException(status_code=500, detail="Search pipeline is not configured.")

        result = pipeline.search(q, limit=limit)
        return {"query": q, **result.to_dict()}

    return app
