from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class FileRecord(Base):
    """Metadata of one uploaded file. Rows are append-only."""

    __tablename__ = "files"

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String, nullable=False, unique=True)
    file_path = Column(String, nullable=False)
    mime_type = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def __repr__(self):
        return f"FileRecord(id={self.id}, file_name={self.file_name}, mime_type={self.mime_type})"
