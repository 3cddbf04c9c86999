# utils/__init__.py
from .file_ops import page_file_for, write_text

__all__ = [
    "page_file_for",
    "write_text",
]
