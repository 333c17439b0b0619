from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from lifepath.apps.engine.questionnaire.engine import build_questionnaire

router = APIRouter(prefix="/api", tags=["questionnaire"])


@router.get("/questionnaire")
async def get_questionnaire(age: Optional[float] = Query(default=None, ge=0)):
    return build_questionnaire(age)


__all__ = ["router"]
