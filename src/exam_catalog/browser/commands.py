"""User intents understood by BrowserSession.dispatch()."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Intent(str, Enum):
    APPLY_FILTERS = "apply-filters"  # argument: FilterSpec
    RESET_FILTERS = "reset-filters"
    QUICK_FILTER = "quick-filter"  # argument: "all" | "subject:<value>" | "tag:<value>"
    TOGGLE_FAVORITE = "toggle-favorite"  # argument: exam id
    CHANGE_PAGE = "change-page"  # argument: page number
    OPEN_DETAIL = "open-detail"  # argument: exam id
    CLOSE_DETAIL = "close-detail"
    DOWNLOAD = "download"  # argument: exam id


@dataclass(frozen=True, slots=True)
class Command:
    intent: Intent
    argument: Any = None
