"""
Brand, Competitor & AI Model Schemas
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geo_visibility.adapters.parsing.text_normalizer import normalize_terms


class BrandIdentity(BaseModel):
    """The tracked brand and the names it goes by"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    domain: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Brand name cannot be blank")
        return v

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: List[str]) -> List[str]:
        return normalize_terms(v)

    @property
    def synonyms(self) -> List[str]:
        """Name first, then tags; case-insensitively unique"""
        return normalize_terms([self.name] + list(self.tags))


class CompetitorIdentity(BaseModel):
    """A competitor tracked by name only"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Competitor name cannot be blank")
        return v

    @property
    def synonyms(self) -> List[str]:
        return [self.name]


class AIModel(BaseModel):
    """Static metadata for an AI engine that answers prompts"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    provider: str = "unknown"
    color: str = "#6b7280"
    cost_per_query: float = Field(default=0.0, ge=0)
    is_llm: bool = True
    weight: float = Field(default=1.0, ge=0)
