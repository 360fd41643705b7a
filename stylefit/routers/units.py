from fastapi import APIRouter, Depends, HTTPException

from ..security import verify_api_key
from ..services.units import convert_length, convert_weight
from ..schemas.analysis import ConvertRequest, ConvertResponse


router = APIRouter(prefix="/units", tags=["units"], dependencies=[Depends(verify_api_key)])

_LENGTH = {"inches", "cm"}
_WEIGHT = {"lbs", "kg"}


@router.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest) -> ConvertResponse:
    units = {request.from_unit, request.to_unit}
    if units <= _LENGTH:
        return ConvertResponse(value=convert_length(request.value, request.from_unit, request.to_unit))
    if units <= _WEIGHT:
        return ConvertResponse(value=convert_weight(request.value, request.from_unit, request.to_unit))
    raise HTTPException(status_code=400, detail="Cannot convert between length and weight units")
