from fastapi import APIRouter, Depends

from ..security import verify_api_key
from ..services.arm_fit import arm_fit_for_profile
from ..services.body_type import body_type_for_profile
from ..services.recommender import Recommender
from ..schemas.analysis import RecommendationSet
from .deps import session_profile


router = APIRouter(prefix="/recommendations", tags=["recommend"], dependencies=[Depends(verify_api_key)])


@router.get("", response_model=RecommendationSet, response_model_exclude_none=True)
async def recommendations(session=Depends(session_profile)) -> RecommendationSet:
    _, profile = session
    measurements = profile.measurements
    return Recommender().recommend(body_type_for_profile(measurements), arm_fit_for_profile(measurements))
