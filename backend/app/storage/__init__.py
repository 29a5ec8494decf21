from app.storage.base import Storage
from app.storage.memory import MemStorage

__all__ = ["Storage", "MemStorage"]
