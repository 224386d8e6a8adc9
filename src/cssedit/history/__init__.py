from cssedit.history.manager import DEFAULT_MAX_HISTORY_SIZE, HistoryManager
from cssedit.history.snapshot import HistorySnapshot

__all__ = ["DEFAULT_MAX_HISTORY_SIZE", "HistoryManager", "HistorySnapshot"]
