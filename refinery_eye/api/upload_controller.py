# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, UploadFile

# Local application imports
from ..application.dto.upload_dto import UploadReferencesResponse, UploadVideoResponse
from ..application.use_cases.upload.upload_references import UploadReferencesUseCase
from ..application.use_cases.upload.upload_video import UploadVideoUseCase
from ..core.exceptions import ValidationError
from ..di.container import get_container
from ..domain.models.session import Session
from .dependencies import get_current_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


@router.post("/upload-video", response_model=UploadVideoResponse)
async def upload_video(
    video: Optional[UploadFile] = File(None),
    session: Session = Depends(get_current_session),
) -> UploadVideoResponse:
    """
    Store the inspection video

    Returns:
        Locator, original filename and storage path of the stored video
    """
    if video is None:
        raise ValidationError("Missing 'video' form field", user_message="No file uploaded")

    container = get_container()
    upload_video_use_case = container.get(UploadVideoUseCase)
    try:
        uploaded = await upload_video_use_case.execute(video)
    finally:
        await video.close()
    logger.info(f"{session.username} uploaded video {uploaded.filename}")
    return uploaded


@router.post("/upload-references", response_model=UploadReferencesResponse)
async def upload_references(
    references: Optional[List[UploadFile]] = File(None),
    session: Session = Depends(get_current_session),
) -> UploadReferencesResponse:
    """
    Store reference PDFs; files of other types are listed in ``skipped``
    """
    if not references:
        raise ValidationError("Missing 'references' form field", user_message="No files uploaded")

    container = get_container()
    upload_references_use_case = container.get(UploadReferencesUseCase)
    try:
        uploaded = await upload_references_use_case.execute(references)
    finally:
        for reference in references:
            await reference.close()
    logger.info(f"{session.username} uploaded {len(uploaded.files)} reference PDF(s)")
    return uploaded
