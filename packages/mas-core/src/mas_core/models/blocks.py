"""Content blocks: self-describing units of rich content attached to a report.

A block is one of five variants, discriminated on the ``type`` key. Each
variant only carries its own fields, so renderers can match exhaustively on
the variant class instead of checking which optional fields happen to be set.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .status import Status


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class KVPair(BaseModel):
    """Key/value pair with an optional leading icon."""

    model_config = ConfigDict(extra="ignore")
    key: str = ""
    value: str = ""
    icon: str = ""


class ListItem(BaseModel):
    """List entry; the icon falls back to the icon of ``status`` when unset."""

    model_config = ConfigDict(extra="ignore")
    text: str = ""
    icon: str = ""
    status: Status | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v):
        return _blank_to_none(v)

    @property
    def effective_icon(self) -> str:
        if self.icon:
            return self.icon
        if self.status is not None:
            return self.status.icon
        return ""


class TextBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["text"] = "text"
    title: str = ""
    content: str = ""


class KVPairsBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["kv_pairs"] = "kv_pairs"
    title: str = ""
    pairs: list[KVPair] = Field(default_factory=list)


class ListBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["list"] = "list"
    title: str = ""
    items: list[ListItem] = Field(default_factory=list)


class TableBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["table"] = "table"
    title: str = ""
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)


class MetricBlock(BaseModel):
    """Single labelled value; ``target`` is the value it is measured against."""

    model_config = ConfigDict(extra="ignore")
    type: Literal["metric"] = "metric"
    title: str = ""
    label: str = ""
    value: str = ""
    status: Status | None = None
    target: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v):
        return _blank_to_none(v)


ContentBlock = Annotated[
    Union[TextBlock, KVPairsBlock, ListBlock, TableBlock, MetricBlock],
    Field(discriminator="type"),
]

BLOCK_TYPES: dict[str, type[BaseModel]] = {
    "text": TextBlock,
    "kv_pairs": KVPairsBlock,
    "list": ListBlock,
    "table": TableBlock,
    "metric": MetricBlock,
}


# -------------------------------
# Constructors
# -------------------------------


def text_block(title: str, content: str) -> TextBlock:
    return TextBlock(title=title, content=content)


def kv_pairs_block(title: str, *pairs: KVPair) -> KVPairsBlock:
    return KVPairsBlock(title=title, pairs=list(pairs))


def list_block(title: str, *items: ListItem) -> ListBlock:
    return ListBlock(title=title, items=list(items))


def table_block(title: str, headers: list[str], rows: list[list[str]]) -> TableBlock:
    return TableBlock(title=title, headers=list(headers), rows=[list(r) for r in rows])


def metric_block(label: str, value: str, status: Status | None = None, target: str = "") -> MetricBlock:
    """Build a metric block. Pass an empty ``target`` to omit it."""
    return MetricBlock(label=label, value=value, status=status, target=target)
