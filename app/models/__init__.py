from .file import FileRecord

__all__ = [
    "FileRecord",
]
