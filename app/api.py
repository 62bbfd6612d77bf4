"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.schemas import PredictionResponse
from services.predictor import PredictionService, build_default_predictor

router = APIRouter()


def get_predictor() -> PredictionService:
    return build_default_predictor()


@router.get(
    "/api/fusion/predict",
    response_model=PredictionResponse,
    summary="Fuse synthetic sensors with the reference models and forecast 30 minutes ahead.",
)
async def predict(
    lat: Optional[str] = Query(None, description="Latitude in decimal degrees."),
    lon: Optional[str] = Query(None, description="Longitude in decimal degrees."),
    timestamp: Optional[str] = Query(
        None, description="ISO-8601 instant to evaluate; defaults to now."
    ),
    predictor: PredictionService = Depends(get_predictor),
) -> PredictionResponse:
    # Raw strings: unparseable coordinates fall back instead of failing validation.
    result = predictor.predict(lat=lat, lon=lon, timestamp=timestamp)
    return PredictionResponse.from_result(result)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
