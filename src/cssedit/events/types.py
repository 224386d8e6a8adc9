"""Event types emitted by the history manager, autosave and editing session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryChanged:
    can_undo: bool
    can_redo: bool
    size: int
    current_index: int


@dataclass(frozen=True)
class SaveStatusChanged:
    status: str
    error_message: str = ""


@dataclass(frozen=True)
class RulesReplaced:
    count: int
