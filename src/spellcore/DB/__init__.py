from .api import WordStore, make_store
from .memory_store import MemoryStore
from .file_store import FileStore

__all__ = ["WordStore", "make_store", "MemoryStore", "FileStore"]
