# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ..application.dto.analysis_dto import AnalyzeRequest, AnalyzeResponse
from ..application.use_cases.analysis.analyze_inspection import AnalyzeInspectionUseCase
from ..di.container import get_container
from ..domain.models.session import Session
from .dependencies import get_current_session


router = APIRouter(tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    session: Session = Depends(get_current_session),
) -> AnalyzeResponse:
    """
    Analyze an uploaded video against the uploaded reference PDFs and cited URLs

    Errors map to 400 (no video), 404 (upload missing), 502/503/504 (model side).
    """
    container = get_container()
    analyze_use_case = container.get(AnalyzeInspectionUseCase)
    return await analyze_use_case.execute(request)
