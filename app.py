"""FastAPI web app for interactive tower placement and HDOP coverage."""

import logging
from fastapi import FastAPI
from pydantic import BaseModel, Field
from typing import List, Optional

from tower_hdop.analysis import analyze, coverage_stats
from tower_hdop.config import (
    DEFAULT_CLUSTER_THRESHOLD_KM, DEFAULT_MAP_CENTER, DEFAULT_PRECISION,
    OVERLAY_TYPES, PRECISION_OPTIONS,
)
from tower_hdop.core import LatLng, estimate_hdop, locate
from tower_hdop.io.towers_file import TowerModel

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tower HDOP Planner")

# ============================================================================
# Data models
# ============================================================================

class Point(BaseModel):
    lat: float
    lng: float

class AnalyzeRequest(BaseModel):
    towers: List[TowerModel] = []
    precision: float = DEFAULT_PRECISION
    threshold_km: float = Field(DEFAULT_CLUSTER_THRESHOLD_KM, gt=0.0)
    legacy_lng_delta: bool = False

class LocateRequest(BaseModel):
    towers: List[TowerModel] = []
    threshold_km: float = Field(DEFAULT_CLUSTER_THRESHOLD_KM, gt=0.0)
    legacy_lng_delta: bool = False

class EstimateRequest(BaseModel):
    point: Point
    towers: List[TowerModel] = []

# ============================================================================
# Engine glue
# ============================================================================

def _center_payload(center: Optional[LatLng]) -> Optional[dict]:
    if center is None:
        return None
    return {"lat": center.lat, "lng": center.lng}

def run_analysis(req: AnalyzeRequest) -> dict:
    towers = [t.to_tower() for t in req.towers]
    result = analyze(towers, req.precision, req.threshold_km,
                     legacy_lng_delta=req.legacy_lng_delta)
    return {
        "precision": req.precision,
        "center": _center_payload(result.center),
        "grid": [p.to_dict() for p in result.grid],
        "stats": coverage_stats(result.grid),
    }

# ============================================================================
# API endpoints
# ============================================================================

# Engine handlers are plain functions so FastAPI runs them in its threadpool

@app.post("/api/analyze")
def analyze_towers(req: AnalyzeRequest):
    try:
        return {"ok": True, "result": run_analysis(req)}
    except ValueError as e:
        logger.error("Analysis failed: %s", e)
        return {"ok": False, "error": str(e)}

@app.post("/api/locate")
def locate_towers(req: LocateRequest):
    center = locate([t.to_tower() for t in req.towers], req.threshold_km,
                    legacy_lng_delta=req.legacy_lng_delta)
    return {"ok": True, "center": _center_payload(center)}

@app.post("/api/estimate")
def estimate_point(req: EstimateRequest):
    est = estimate_hdop(LatLng(req.point.lat, req.point.lng), [t.to_tower() for t in req.towers])
    return {"ok": True, "hdop": est.as_float(), "determined": est.determined}

@app.get("/api/precisions")
async def precisions():
    return {
        "default": DEFAULT_PRECISION,
        "options": [{"value": v, "label": f"{label} ({v:g})"} for v, label in PRECISION_OPTIONS.items()],
    }

@app.get("/api/defaults")
async def defaults():
    return {
        "map_center": {"lat": DEFAULT_MAP_CENTER[0], "lng": DEFAULT_MAP_CENTER[1]},
        "overlay_types": list(OVERLAY_TYPES),
        "cluster_threshold_km": DEFAULT_CLUSTER_THRESHOLD_KM,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8001)
