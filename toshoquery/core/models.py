from typing import List, Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toshoquery.config.settings import settings
from toshoquery.utils.helpers import is_truthy, to_text


# ===========================
# Query Options
# ===========================
class QueryOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    strict: bool = True
    scope_field: str = Field(default_factory=lambda: settings.DEFAULT_SCOPE_FIELD, alias="scopeField")
    include_loose_numeric: bool = Field(default=False, alias="includeLooseNumeric")
    include_non_padded: bool = Field(default=False, alias="includeNonPadded")
    # None disables exclusion; only a missing field falls back to the defaults
    exclude_terms: Optional[List[str]] = Field(
        default_factory=lambda: list(settings.DEFAULT_EXCLUDE_TERMS),
        alias="excludeTerms"
    )

    # ===========================
    # Field Validators
    # ===========================
    @field_validator("strict", "include_loose_numeric", "include_non_padded", mode="before")
    @classmethod
    def coerce_flags(cls, v):
        return is_truthy(v)

    @field_validator("scope_field", mode="before")
    @classmethod
    def coerce_scope_field(cls, v):
        return to_text(v) if is_truthy(v) else ""

    @field_validator("exclude_terms", mode="before")
    @classmethod
    def coerce_exclude_terms(cls, v):
        if v is None:
            return None
        if not isinstance(v, (list, tuple)):
            raise ValueError("excludeTerms must be a list")
        return [to_text(term) for term in v if is_truthy(term)]

    @property
    def scope(self) -> str:
        if self.strict and self.scope_field:
            return f"@{self.scope_field} "
        return ""


# ===========================
# Scraped Results
# ===========================
class Link(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    href: Optional[str] = None
    text: str = ""
    is_magnet: bool = Field(default=False, alias="isMagnet")


class ResultEntry(BaseModel):
    title: str
    links: List[Link]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
