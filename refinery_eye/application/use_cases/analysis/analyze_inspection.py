from ...dto.analysis_dto import AnalysisResultDto, AnalyzeRequest, AnalyzeResponse
from ...services.analysis_gateway import AnalysisGateway


class AnalyzeInspectionUseCase:
    """Use case for analyzing an uploaded video against its references"""

    def __init__(self, analysis_gateway: AnalysisGateway) -> None:
        self.analysis_gateway = analysis_gateway

    async def execute(self, request: AnalyzeRequest) -> AnalyzeResponse:
        result = await self.analysis_gateway.analyze(
            video_locator=request.video_url,
            reference_locators=request.reference_urls,
            reference_urls=request.reference_urls_list,
        )
        return AnalyzeResponse(result=AnalysisResultDto.from_domain(result))
