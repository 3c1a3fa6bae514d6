"""FastAPI endpoint for load packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from load_packer.config import configure_logging
from load_packer.io.schemas import PackRequestSchema, PackResultSchema
from load_packer.plan import run_pack

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(
    title="Load Packer API",
    description="3D bin packing service",
)


@app.post("/pack", response_model=PackResultSchema)
def pack(request: PackRequestSchema) -> PackResultSchema:
    """
    Pack items into bins.

    Unknown presets are reported as 422, like schema errors.
    """
    try:
        result = run_pack(request)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        f"packed_items={result.summary.packed_items}, "
        f"unfit_items={result.summary.unfit_items}, "
        f"bins_used={result.summary.bins_used}"
    )
    return result


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
