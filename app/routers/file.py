import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from app.database import get_db
from app.exceptions import NoFileFound, UploadError
from app.helpers.storage import get_upload_dir, save_bytes
from app.schemas.file import FileRecordCreate, FileRecordResponse, UploadResponse
from app.crud.file import create_file_record, get_file_record_by_id, get_all_file_records

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"
DEFAULT_MIME_TYPE = "application/octet-stream"

router = APIRouter(tags=["files"])


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    request: Request,
    db: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
):
    """Store a single multipart file field named ``file`` and record its metadata"""
    # Malformed bodies and a missing field answer 500, never FastAPI's 400/422
    try:
        async with request.form() as form:
            upload = form.get(UPLOAD_FIELD)
            if not isinstance(upload, UploadFile):
                raise UploadError("No file provided")

            file_path = save_bytes(upload_dir, UPLOAD_FIELD, await upload.read())

            file_data = FileRecordCreate(
                file_name=file_path.name,
                file_path=str(file_path),
                mime_type=upload.content_type or DEFAULT_MIME_TYPE,
            )
        saved_file = create_file_record(db, file_data)
    except UploadError as e:
        logger.warning(f"Rejected upload: {e.message}")
        raise
    except Exception as e:
        logger.exception(f"Upload failed: {str(e)}")
        raise UploadError() from e

    logger.info(f"Saved upload {saved_file.file_name} ({saved_file.mime_type})")
    return UploadResponse(
        message="File uploaded and metadata saved successfully",
        file=FileRecordResponse.model_validate(saved_file),
    )


@router.get("/files", response_model=List[FileRecordResponse])
async def list_files(db: Session = Depends(get_db)):
    """List every stored file record in upload order"""
    return get_all_file_records(db)


@router.get("/files/{file_id}", response_model=FileRecordResponse)
async def get_file(file_id: int, db: Session = Depends(get_db)):
    file = get_file_record_by_id(db, file_id)
    if not file:
        raise NoFileFound()
    return file
