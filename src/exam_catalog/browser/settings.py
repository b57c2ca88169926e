"""Browsing-client options read from config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from exam_catalog.browser.catalog_store import FAVORITES_KEY
from exam_catalog.browser.pagination import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

DEEP_LINK_PARAM = "exam"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class QuickFilter(_CamelModel):
    text: str
    filter: str


class UiConfig(_CamelModel):
    items_per_page: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)


def _default_quick_filters() -> list[QuickFilter]:
    return [
        QuickFilter(text="全部", filter="all"),
        QuickFilter(text="数学", filter="subject:数学"),
        QuickFilter(text="英语", filter="subject:英语"),
        QuickFilter(text="物理", filter="subject:物理"),
        QuickFilter(text="化学", filter="subject:化学"),
    ]


class BrowserSettings(_CamelModel):
    ui_config: UiConfig = Field(default_factory=UiConfig)
    available_grades: list[str] = Field(default_factory=lambda: ["高一", "高二", "高三"])
    quick_filters: list[QuickFilter] = Field(default_factory=_default_quick_filters)
    favorites_key: str = FAVORITES_KEY
    deep_link_param: str = DEEP_LINK_PARAM

    @property
    def page_size(self) -> int:
        return self.ui_config.items_per_page

    @classmethod
    def from_file(cls, path: Path) -> BrowserSettings:
        """Load settings from a config.json file, falling back to defaults if it is unusable."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except (OSError, json.JSONDecodeError, PydanticValidationError):
            logger.warning(
                "Using default browser settings",
                extra={"path": str(path)},
                exc_info=True,
            )
            return cls()
