import random
import time
from pathlib import Path

from app.config import UPLOAD_DIR


def get_upload_dir() -> Path:
    """Dependency returning the directory uploads are written to"""
    upload_dir = Path(UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def generate_stored_name(field_name: str) -> str:
    """Build ``<field>-<epoch ms>-<random int>`` so repeated uploads never collide"""
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1)}"
    return f"{field_name}-{unique_suffix}"


def save_bytes(upload_dir: Path, field_name: str, content: bytes) -> Path:
    file_path = upload_dir / generate_stored_name(field_name)
    with file_path.open("wb") as buffer:
        buffer.write(content)
    return file_path


def read_bytes(file_path: str) -> bytes:
    with Path(file_path).open("rb") as f:
        return f.read()
