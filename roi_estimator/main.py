"""FastAPI application for the ROI estimator: stateless calculation endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from roi_estimator.citations import get_all_citations, get_citation
from roi_estimator.config import Settings
from roi_estimator.engine import ROIEngine
from roi_estimator.export import render_text_summary
from roi_estimator.hooks import log_calculation
from roi_estimator.methodology import get_default_methodology, load_methodology
from roi_estimator.models import Assumptions, OrgProfile
from roi_estimator.presets import get_all_presets, get_preset

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="ROI Estimator API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Engine holds only configuration, so one instance serves every request
_methodology = (
    load_methodology(settings.methodology_path)
    if settings.methodology_path is not None
    else get_default_methodology()
)
engine = ROIEngine(
    methodology=_methodology,
    clamp_negative_inputs=settings.clamp_negative_inputs,
)
logger.info(
    "Loaded methodology %s@%s (clamp_negative_inputs=%s)",
    _methodology.id,
    _methodology.version,
    settings.clamp_negative_inputs,
)


class CalculateRequest(BaseModel):
    profile: OrgProfile = Field(default_factory=OrgProfile)
    assumptions: Assumptions = Field(default_factory=Assumptions)


class SummaryRequest(CalculateRequest):
    prospect_name: Optional[str] = None


@app.post("/api/roi")
async def calculate_roi(body: CalculateRequest):
    """Compute the five savings components and their total."""
    result = engine.calculate(body.profile, body.assumptions)
    log_calculation("api", body.profile, body.assumptions, result)
    return result.to_dict()


@app.post("/api/roi/summary", response_class=PlainTextResponse)
async def roi_summary(body: SummaryRequest):
    """Plain-text summary for copy/paste into an email or deck."""
    result = engine.calculate(body.profile, body.assumptions)
    log_calculation("summary", body.profile, body.assumptions, result)
    return render_text_summary(
        result,
        body.profile,
        prospect_name=body.prospect_name,
        currency_symbol=settings.currency_symbol,
    )


@app.get("/api/presets")
async def list_presets():
    return [
        {
            "name": p.name.value,
            "label": p.label,
            "employee_count": p.employee_count,
            "device_count": p.device_count,
            "annual_insurance_premium": p.annual_insurance_premium,
        }
        for p in get_all_presets()
    ]


@app.get("/api/presets/{name}/roi")
async def preset_roi(name: str):
    """Compute ROI for a preset with default assumptions."""
    preset = get_preset(name)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset '{name}' not found")
    profile = preset.to_profile()
    assumptions = Assumptions()
    result = engine.calculate(profile, assumptions)
    log_calculation(f"preset:{preset.name.value}", profile, assumptions, result)
    return {"profile": profile.model_dump(), **result.to_dict()}


@app.get("/api/citations")
async def list_citations():
    return {key: c.to_dict() for key, c in get_all_citations().items()}


@app.get("/api/citations/{key}")
async def citation_detail(key: str):
    citation = get_citation(key)
    if citation is None:
        raise HTTPException(status_code=404, detail=f"Citation '{key}' not found")
    return citation.to_dict()


@app.get("/api/methodology")
async def methodology():
    """Component formulas, assumption ranges and literature defaults."""
    return {
        **engine.methodology.model_dump(),
        "defaults": Assumptions().model_dump(),
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
