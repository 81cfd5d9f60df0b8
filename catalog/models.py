"""
Catalog data model.

An Entry mirrors one record of data.json. The file uses Portuguese keys
(nome, descricao, data_criacao, popularidade); those are accepted as
aliases next to the English field names.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    ALFA_ASC  = "alfa_asc"    # A-Z
    ALFA_DESC = "alfa_desc"   # Z-A
    ANO_DESC  = "ano_desc"    # newest first
    ANO_ASC   = "ano_asc"     # oldest first
    POP_DESC  = "pop_desc"    # most popular first
    POP_ASC   = "pop_asc"     # least popular first

    @classmethod
    def parse(cls, value: str) -> "SortOrder | None":
        """Return the matching order, or None for an unknown value."""
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_SORT_ORDER = SortOrder.ALFA_ASC


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="nome")
    description: str = Field(alias="descricao")
    tags: tuple[str, ...] = ()
    creation_year: int = Field(alias="data_criacao")
    popularity: float = Field(alias="popularidade")
    link: str
