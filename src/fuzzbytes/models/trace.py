from __future__ import annotations
from typing import List, Union

from pydantic import BaseModel, Field, computed_field

from .plan import Op

# bytes values are rendered as hex text; strings hold Latin-1 passthrough text
Scalar = Union[bool, int, float, str]


class DecodedValue(BaseModel):
    index: int = Field(..., ge=0)
    name: str | None = None
    op: Op
    value: Union[Scalar, List[Scalar], None] = None
    front_before: int = Field(..., ge=0)
    back_before: int = Field(..., ge=0)
    front_after: int = Field(..., ge=0)
    back_after: int = Field(..., ge=0)

    @computed_field
    @property
    def consumed_front(self) -> int:
        return self.front_after - self.front_before

    @computed_field
    @property
    def consumed_back(self) -> int:
        return self.back_before - self.back_after


class DecodeTrace(BaseModel):
    size: int = Field(..., ge=0)
    values: List[DecodedValue] = Field(default_factory=list)
    remaining: int = Field(0, ge=0)

    def by_name(self, name: str) -> List[DecodedValue]:
        return [v for v in self.values if v.name == name]
