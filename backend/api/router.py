from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import check_payload_size
from config import settings
from models.responses import ScoringResult
from services.scoring import DEFAULT_POLICY, calibrate_score, enrich_analysis, score_analysis

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "policy_weights": DEFAULT_POLICY.weights.as_dict(),
    }


@router.post(
    "/score",
    response_model=ScoringResult,
    dependencies=[Depends(check_payload_size)],
)
@limiter.limit(settings.rate_limit)
async def score(request: Request, analysis: dict[str, Any] = Body(...)):
    return score_analysis(analysis)


@router.post("/score/enriched", dependencies=[Depends(check_payload_size)])
@limiter.limit(settings.rate_limit)
async def score_enriched(request: Request, analysis: dict[str, Any] = Body(...)):
    return enrich_analysis(analysis)


@router.post("/calibrate", dependencies=[Depends(check_payload_size)])
@limiter.limit(settings.rate_limit)
async def calibrate(request: Request, analysis: dict[str, Any] = Body(...)):
    # Without a numeric overall_score the body comes back unchanged
    return calibrate_score(analysis)
