from datetime import datetime, timedelta

from app.crud.file import (
    create_file_record,
    get_all_file_records,
    get_file_record_by_id,
    get_latest_file_record,
)
from app.models.file import FileRecord
from app.schemas.file import FileRecordCreate


def _record(name):
    return FileRecordCreate(file_name=name, file_path=f"public/{name}", mime_type="image/png")


def test_create_sets_created_at(db_session):
    record = create_file_record(db_session, _record("file-1"))

    assert record.id is not None
    assert record.created_at is not None
    assert record.mime_type == "image/png"


def test_latest_is_none_when_store_is_empty(db_session):
    assert get_latest_file_record(db_session) is None


def test_latest_follows_created_at_not_insert_order(db_session):
    now = datetime.now()
    db_session.add(FileRecord(file_name="newer", file_path="p/newer", mime_type="a/b", created_at=now))
    db_session.add(
        FileRecord(file_name="older", file_path="p/older", mime_type="a/b", created_at=now - timedelta(minutes=5))
    )
    db_session.commit()

    assert get_latest_file_record(db_session).file_name == "newer"


def test_latest_breaks_timestamp_ties_by_id(db_session):
    now = datetime.now()
    db_session.add(FileRecord(file_name="first", file_path="p/1", mime_type="a/b", created_at=now))
    db_session.add(FileRecord(file_name="second", file_path="p/2", mime_type="a/b", created_at=now))
    db_session.commit()

    assert get_latest_file_record(db_session).file_name == "second"


def test_get_by_id_and_list(db_session):
    a = create_file_record(db_session, _record("file-a"))
    b = create_file_record(db_session, _record("file-b"))

    assert get_file_record_by_id(db_session, b.id).file_name == "file-b"
    assert get_file_record_by_id(db_session, 999) is None
    assert [r.id for r in get_all_file_records(db_session)] == [a.id, b.id]
