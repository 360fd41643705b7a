from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, HTTPException
import structlog

from ..security import create_session_token, verify_api_key
from ..services.arm_fit import arm_fit_for_profile
from ..services.body_type import body_type_for_profile
from ..services.sessions import sessions
from ..services.sizing import size_for_profile
from ..schemas.profile import (
    BUDGET_OPTIONS,
    COLOR_OPTIONS,
    FIT_OPTIONS,
    STYLE_OPTIONS,
    Color,
    PreferencesUpdate,
    StylePreferences,
    UnitUpdate,
    UserProfile,
)
from .deps import session_profile


logger = structlog.get_logger("stylefit")

router = APIRouter(tags=["profile"], dependencies=[Depends(verify_api_key)])


def _profile_payload(profile: UserProfile) -> Dict[str, Any]:
    data = profile.model_dump(by_alias=True)
    data["measurements"]["weightUnit"] = profile.measurements.weight_unit
    data["labels"] = profile.measurements.labels()
    return data


@router.post("/sessions")
async def create_session():
    session_id, profile = sessions.create()
    logger.info("session_created", session_id=session_id, unit=profile.measurements.unit)
    return {"session_token": create_session_token(session_id), "profile": _profile_payload(profile)}


@router.get("/profile")
async def get_profile(session=Depends(session_profile)):
    _, profile = session
    return _profile_payload(profile)


@router.patch("/profile/measurements")
async def update_measurements(
    values: Dict[str, Optional[str | float]] = Body(...),
    session=Depends(session_profile),
):
    session_id, profile = session
    try:
        measurements = profile.measurements.with_values(values)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=f"Unknown measurement field: {e.args[0]}")
    profile = sessions.replace(session_id, profile.model_copy(update={"measurements": measurements}))
    return _profile_payload(profile)


@router.put("/profile/unit")
async def set_unit(update: UnitUpdate, session=Depends(session_profile)):
    session_id, profile = session
    old_unit = profile.measurements.unit
    measurements = profile.measurements.converted_to(update.unit)
    profile = sessions.replace(session_id, profile.model_copy(update={"measurements": measurements}))
    if old_unit != update.unit:
        logger.info("unit_toggled", session_id=session_id, from_unit=old_unit, to_unit=update.unit)
    return _profile_payload(profile)


@router.patch("/profile/preferences")
async def update_preferences(update: PreferencesUpdate, session=Depends(session_profile)):
    session_id, profile = session
    changes = update.model_dump(exclude_none=True)
    preferences = StylePreferences.model_validate({**profile.preferences.model_dump(), **changes})
    profile = sessions.replace(session_id, profile.model_copy(update={"preferences": preferences}))
    return _profile_payload(profile)


@router.post("/profile/preferences/colors/{color}/toggle")
async def toggle_color(color: Color, session=Depends(session_profile)):
    session_id, profile = session
    preferences = profile.preferences.toggle_color(color)
    profile = sessions.replace(session_id, profile.model_copy(update={"preferences": preferences}))
    return _profile_payload(profile)


@router.get("/profile/body-type")
async def body_type(session=Depends(session_profile)):
    _, profile = session
    return {"bodyType": body_type_for_profile(profile.measurements)}


@router.get("/profile/arm-fit")
async def arm_fit(session=Depends(session_profile)):
    _, profile = session
    analysis = arm_fit_for_profile(profile.measurements)
    return {"armAnalysis": analysis.model_dump(by_alias=True) if analysis else None}


@router.get("/profile/size")
async def size(session=Depends(session_profile)):
    _, profile = session
    return {"size": size_for_profile(profile.measurements), "unit": profile.measurements.unit}


@router.get("/profile/options")
async def options():
    return {
        "units": ["inches", "cm"],
        "styles": STYLE_OPTIONS,
        "colors": COLOR_OPTIONS,
        "budgets": BUDGET_OPTIONS,
        "fits": FIT_OPTIONS,
    }
