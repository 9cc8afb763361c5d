from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.file import FileRecord
from app.schemas.file import FileRecordCreate


def create_file_record(db: Session, file_data: FileRecordCreate) -> FileRecord:
    db_file = FileRecord(**file_data.model_dump())
    db.add(db_file)
    db.commit()
    db.refresh(db_file)
    return db_file


def get_latest_file_record(db: Session) -> Optional[FileRecord]:
    return (
        db.query(FileRecord)
        .order_by(FileRecord.created_at.desc(), FileRecord.id.desc())
        .first()
    )


def get_file_record_by_id(db: Session, file_id: int) -> Optional[FileRecord]:
    return db.query(FileRecord).filter(FileRecord.id == file_id).first()


def get_all_file_records(db: Session) -> List[FileRecord]:
    return db.query(FileRecord).order_by(FileRecord.id.asc()).all()
