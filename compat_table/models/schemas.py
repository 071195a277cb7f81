"""
Pydantic Models and Schemas
===========================

Read-only models over already-deserialized compat data documents, plus the
explicit render configuration handed to the table builders.

A compat document comes in two shapes:

- ``FeatureDocument``: ``{"__compat": {"basic_support": {...}, "<sub-feature>": {...}}}``
- ``IdentifierDocument``: ``{"<feature name>": <feature record>, ...}``

Models are frozen; nothing in the rendering pipeline mutates its input.
"""

from collections.abc import Mapping
from typing import Any, Dict, ItemsView, Iterator, Optional, Tuple, Union, TYPE_CHECKING

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StrictBool,
    field_validator,
    model_validator,
)

if TYPE_CHECKING:
    from compat_table.config.settings import Settings


COMPAT_KEY = "__compat"
BASIC_SUPPORT_KEY = "basic_support"

DEFAULT_BROWSERS: Dict[str, str] = {
    "chrome": "Chrome",
    "edge": "Edge",
    "firefox": "Firefox",
    "firefox_android": "Firefox for Android",
    "opera": "Opera",
}

# null: unknown, true: supported (version unspecified), false: unsupported, str: version
VersionValue = Optional[Union[StrictBool, str]]


# Compat data models
class SupportEntry(BaseModel):
    """Support information for a single browser."""

    model_config = ConfigDict(frozen=True, extra="allow")

    version_added: VersionValue = Field(..., description="Version the feature was added in")
    notes: Tuple[str, ...] = Field(default=(), description="Footnote texts, in listed order")

    @field_validator("version_added", mode="before")
    @classmethod
    def normalize_version(cls, v: Any) -> Any:
        """Accept numeric versions as their string form."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("notes", mode="before")
    @classmethod
    def normalize_notes(cls, v: Any) -> Any:
        """Accept a single note string as a one-item list."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @property
    def has_notes(self) -> bool:
        return bool(self.notes)


class SupportStatement(BaseModel):
    """Support set of one feature or sub-feature, keyed by browser identifier."""

    model_config = ConfigDict(frozen=True, extra="allow")

    support: Dict[str, SupportEntry]

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_support_set(cls, data: Any) -> Any:
        """Accept a bare browser mapping without the ``support`` wrapper."""
        if isinstance(data, Mapping) and "support" not in data:
            return {"support": data}
        return data

    def entry_for(self, browser: str) -> SupportEntry:
        """
        Get the support entry of one browser.

        Raises:
            KeyError: If the browser has no entry in this set
        """
        return self.support[browser]


class FeatureRecord(RootModel[Dict[str, SupportStatement]]):
    """The ``__compat`` value of a feature: ``basic_support`` plus named sub-features."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def require_basic_support(self) -> "FeatureRecord":
        if BASIC_SUPPORT_KEY not in self.root:
            raise ValueError(f"Compat record must contain '{BASIC_SUPPORT_KEY}'")
        return self

    @property
    def basic_support(self) -> SupportStatement:
        return self.root[BASIC_SUPPORT_KEY]

    def items(self) -> ItemsView[str, SupportStatement]:
        """All support statements, ``basic_support`` included, in document order."""
        return self.root.items()

    def subfeatures(self) -> Iterator[Tuple[str, SupportStatement]]:
        """Sub-feature statements in document order, ``basic_support`` excluded."""
        for name, statement in self.root.items():
            if name != BASIC_SUPPORT_KEY:
                yield name, statement


class FeatureDocument(BaseModel):
    """Document describing a single feature."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    compat: FeatureRecord = Field(..., alias=COMPAT_KEY)


class IdentifierDocument(RootModel[Dict[str, FeatureRecord]]):
    """Document mapping dotted feature names to feature records."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def unwrap_compat(cls, data: Any) -> Any:
        """Accept ``{"name": {"__compat": {...}}}`` as well as bare records."""
        if not isinstance(data, Mapping):
            return data
        return {
            name: value[COMPAT_KEY]
            if isinstance(value, Mapping) and COMPAT_KEY in value
            else value
            for name, value in data.items()
        }

    def sorted_features(self) -> Iterator[Tuple[str, FeatureRecord]]:
        """Features in lexicographic name order."""
        for name in sorted(self.root):
            yield name, self.root[name]


CompatDocument = Union[FeatureDocument, IdentifierDocument]


# Render configuration models
class TableLabels(BaseModel):
    """Pre-resolved display strings used inside compat tables."""

    model_config = ConfigDict(frozen=True)

    yes: str = Field(default="Yes", description="Supported, version unknown")
    no: str = Field(default="No", description="Not supported")
    unknown: str = Field(default="?", description="Support status unknown")
    basic_support: str = Field(default="Basic support", description="Basic support row label")


class RenderContext(BaseModel):
    """Explicit configuration for one render call."""

    model_config = ConfigDict(frozen=True)

    locale: str = Field(default="en-US", description="First path segment of documentation URLs")
    browsers: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_BROWSERS),
        description="Ordered browser identifier to display name catalog",
    )
    labels: TableLabels = Field(default_factory=TableLabels)
    label_column_width: int = Field(default=30, ge=1, le=99, description="Label column width in percent")

    @field_validator("browsers")
    @classmethod
    def validate_browsers(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Validate the browser catalog is not empty."""
        if not v:
            raise ValueError("Browser catalog must contain at least one browser")
        return v

    @property
    def browser_column_width(self) -> float:
        """Equal share of the remaining row width for each browser column."""
        return (100 - self.label_column_width) / len(self.browsers)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RenderContext":
        """Build a render context from application settings."""
        return cls(
            locale=settings.locale,
            browsers=settings.browsers,
            labels=settings.labels,
            label_column_width=settings.label_column_width,
        )
