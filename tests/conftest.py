import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.helpers.storage import get_upload_dir
from app.service.gemini import get_generation_service
from main import app


class FakeGenerationService:
    """Records every call and answers with a canned text"""

    def __init__(self, answer="generated answer", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    async def generate(self, prompt, data, mime_type):
        self.calls.append({"prompt": prompt, "data": data, "mime_type": mime_type})
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def generation_service():
    return FakeGenerationService()


@pytest.fixture
def client(engine, upload_dir, generation_service):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_dir] = lambda: upload_dir
    app.dependency_overrides[get_generation_service] = lambda: generation_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upload(client):
    def _upload(content=b"hello", filename="note.txt", content_type="text/plain"):
        return client.post("/upload", files={"file": (filename, content, content_type)})

    return _upload
