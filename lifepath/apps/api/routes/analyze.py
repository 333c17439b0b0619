from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from lifepath.apps.api.core.validation import InvalidHabitInput, parse_habit_payload
from lifepath.apps.engine.simulation.engine import simulate_future

router = APIRouter(prefix="/api", tags=["analyze"])
logger = logging.getLogger(__name__)


@router.post("/analyze")
async def analyze(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        return JSONResponse({"error": "Invalid input"}, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        habits = parse_habit_payload(payload)
    except InvalidHabitInput as exc:
        logger.info("analyze.rejected reason=%s", exc)
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        result = simulate_future(habits)
        response = JSONResponse(result.model_dump(mode="json", by_alias=True))
    except Exception:
        logger.exception("Analysis failed")
        return JSONResponse(
            {"error": "Failed to analyze data"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return response


__all__ = ["router"]
