from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..security import verify_api_key
from ..services.analyzer import GarmentAnalyzer
from ..services.product_api import ProductApiClient
from ..services.sessions import sessions
from ..schemas.analysis import AnalysisResult, AnalyzeUrlRequest
from .deps import session_profile


router = APIRouter(prefix="/analyze", tags=["analyze"], dependencies=[Depends(verify_api_key)])


@router.post("/url", response_model=AnalysisResult)
async def analyze_url(request: AnalyzeUrlRequest, session=Depends(session_profile)) -> AnalysisResult:
    url = request.url.strip()
    if not url.startswith("http"):
        raise HTTPException(status_code=400, detail="Please provide a product URL starting with http")

    session_id, _ = session
    # Snapshot before the fetch; edits made while it is in flight do not apply
    profile = sessions.snapshot(session_id)
    product = await ProductApiClient().fetch(url)
    return GarmentAnalyzer().analyze(profile, product)


@router.post("/image", response_model=AnalysisResult)
async def analyze_image(image: UploadFile = File(...), session=Depends(session_profile)) -> AnalysisResult:
    if image.content_type is None or not image.content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Please upload an image file")

    session_id, _ = session
    profile = sessions.snapshot(session_id)
    product = ProductApiClient().from_image(image.filename)
    return GarmentAnalyzer().analyze(profile, product)
