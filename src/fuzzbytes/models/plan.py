from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, model_validator

from ..binary.numeric import FLOAT_KINDS, INT_KINDS


class Op(str, Enum):
    BYTES = "bytes"
    BYTES_WITH_TERMINATOR = "bytes_with_terminator"
    BYTES_AS_STRING = "bytes_as_string"
    REMAINING_BYTES = "remaining_bytes"
    REMAINING_BYTES_AS_STRING = "remaining_bytes_as_string"
    INTEGRAL = "integral"
    INTEGRAL_IN_RANGE = "integral_in_range"
    BOOL = "bool"
    PICK = "pick"
    ENUM = "enum"
    PROBABILITY = "probability"
    FLOATING_POINT = "floating_point"
    FLOATING_POINT_IN_RANGE = "floating_point_in_range"
    RANDOM_LENGTH_STRING = "random_length_string"
    INTEGRAL_LIST = "integral_list"
    FLOATING_POINT_LIST = "floating_point_list"


INT_OPS = {Op.INTEGRAL, Op.INTEGRAL_IN_RANGE, Op.INTEGRAL_LIST}
FLOAT_OPS = {Op.PROBABILITY, Op.FLOATING_POINT, Op.FLOATING_POINT_IN_RANGE, Op.FLOATING_POINT_LIST}
COUNT_OPS = {Op.BYTES, Op.BYTES_WITH_TERMINATOR, Op.BYTES_AS_STRING, Op.INTEGRAL_LIST, Op.FLOATING_POINT_LIST}
RANGE_OPS = {Op.INTEGRAL_IN_RANGE, Op.FLOATING_POINT_IN_RANGE}


class DecodeStep(BaseModel):
    op: Op
    name: str | None = None
    count: int | None = Field(None, ge=0)
    kind: str | None = None
    min: Union[int, float, None] = None
    max: Union[int, float, None] = None
    choices: List[Union[int, float, str]] | None = None
    terminator: int = Field(0, ge=0, le=255)
    max_length: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_op_fields(self) -> "DecodeStep":
        if self.op in COUNT_OPS and self.count is None:
            raise ValueError(f"{self.op.value} needs 'count'")
        if self.op in RANGE_OPS:
            if self.min is None or self.max is None:
                raise ValueError(f"{self.op.value} needs 'min' and 'max'")
            if self.min > self.max:
                raise ValueError(f"min {self.min} > max {self.max}")
            if self.op is Op.INTEGRAL_IN_RANGE and not (isinstance(self.min, int) and isinstance(self.max, int)):
                raise ValueError("integral_in_range bounds must be integers")
        if self.op in (Op.PICK, Op.ENUM) and not self.choices:
            raise ValueError(f"{self.op.value} needs non-empty 'choices'")
        if self.op is Op.ENUM and not all(isinstance(c, str) and c.isidentifier() for c in self.choices or []):
            raise ValueError("enum choices must be identifiers")
        if self.op is Op.ENUM and len(set(self.choices)) != len(self.choices):
            raise ValueError("enum choices must be unique")
        if self.kind is not None:
            if self.op in INT_OPS and self.kind not in INT_KINDS:
                raise ValueError(f"unknown integer kind {self.kind!r}")
            if self.op in FLOAT_OPS and self.kind not in FLOAT_KINDS:
                raise ValueError(f"unknown float kind {self.kind!r}")
            if self.op not in INT_OPS | FLOAT_OPS:
                raise ValueError(f"{self.op.value} takes no 'kind'")
        return self


class DecodePlan(BaseModel):
    steps: List[DecodeStep] = Field(default_factory=list)
    repeat: int = Field(1, ge=1)

    @classmethod
    def from_json(cls, src: Union[str, bytes, Path]) -> "DecodePlan":
        if isinstance(src, Path):
            src = src.read_text(encoding="utf-8")
        return cls.model_validate_json(src)
