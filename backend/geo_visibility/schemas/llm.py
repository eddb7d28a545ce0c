"""
Raw AI Engine Response Schemas
What the fetching layer hands to the engine, one per (prompt, model)
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawCitation(BaseModel):
    """A source reference attached to a model response"""
    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    title: Optional[str] = None
    snippet: Optional[str] = None
    position: Optional[int] = None


class RawModelResponse(BaseModel):
    """Fully retrieved answer from one AI engine"""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str
    text: str = ""
    citations_raw: List[RawCitation] = Field(default_factory=list)
    response_time_ms: Optional[int] = None
    api_cost: Optional[float] = Field(default=None, ge=0)  # None -> model's cost per query
    success: bool = True
    error: Optional[str] = None
