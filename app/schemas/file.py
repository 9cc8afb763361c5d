from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields with camelCase keys and accepts either on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileRecordBase(CamelModel):
    file_name: str
    file_path: str
    mime_type: str


class FileRecordCreate(FileRecordBase):
    pass


class FileRecordResponse(FileRecordBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class UploadResponse(CamelModel):
    message: str
    file: FileRecordResponse


class GenerateRequest(CamelModel):
    message: str
    # When omitted the most recently uploaded file is used
    file_id: Optional[int] = None


class ErrorResponse(BaseModel):
    error: str
