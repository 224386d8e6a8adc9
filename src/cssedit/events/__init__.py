from cssedit.events.bus import EventBus
from cssedit.events.types import HistoryChanged, RulesReplaced, SaveStatusChanged

__all__ = ["EventBus", "HistoryChanged", "RulesReplaced", "SaveStatusChanged"]
