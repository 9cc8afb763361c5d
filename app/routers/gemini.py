import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import FileReadError, GenerationError, NoFileFound
from app.helpers.storage import read_bytes
from app.schemas.file import ErrorResponse, GenerateRequest
from app.crud.file import get_file_record_by_id, get_latest_file_record
from app.service.gemini import GeminiService, get_generation_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gemini"])


@router.post(
    "/gemini",
    response_class=PlainTextResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    payload: GenerateRequest,
    db: Session = Depends(get_db),
    service: GeminiService = Depends(get_generation_service),
):
    """Answer the prompt using a stored file, the most recent one unless fileId is given"""
    if payload.file_id is not None:
        file = get_file_record_by_id(db, payload.file_id)
    else:
        file = get_latest_file_record(db)

    if not file:
        raise NoFileFound()

    try:
        data = read_bytes(file.file_path)
    except OSError as e:
        logger.exception(f"Could not read {file.file_path}: {str(e)}")
        raise FileReadError() from e

    try:
        text = await service.generate(payload.message, data, file.mime_type)
    except Exception as e:
        logger.exception(f"Generation failed for {file.file_name}: {str(e)}")
        raise GenerationError() from e

    return PlainTextResponse(text)
