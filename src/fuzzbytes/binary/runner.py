from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Union

from .numeric import FLOAT64, FLOAT_KINDS, INT64, INT_KINDS
from .provider import Provider
from ..models.plan import DecodePlan, DecodeStep, Op
from ..models.trace import DecodedValue, DecodeTrace

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class PlanError(ValueError):
    pass


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()


def _int_kind(step: DecodeStep):
    return INT_KINDS[step.kind] if step.kind else INT64


def _float_kind(step: DecodeStep):
    return FLOAT_KINDS[step.kind] if step.kind else FLOAT64


def _enum_member(p: Provider, step: DecodeStep) -> str:
    # build a throwaway Enum so selection goes through consume_enum
    enum_cls = Enum(step.name or "PlanEnum", [str(c) for c in step.choices])
    return p.consume_enum(enum_cls).name


_OPS: Dict[Op, Callable[[Provider, DecodeStep], object]] = {
    Op.BYTES: lambda p, s: p.consume_bytes(s.count).hex(),
    Op.BYTES_WITH_TERMINATOR: lambda p, s: p.consume_bytes_with_terminator(s.count, s.terminator).hex(),
    Op.BYTES_AS_STRING: lambda p, s: p.consume_bytes_as_string(s.count),
    Op.REMAINING_BYTES: lambda p, s: p.consume_remaining_bytes().hex(),
    Op.REMAINING_BYTES_AS_STRING: lambda p, s: p.consume_remaining_bytes_as_string(),
    Op.INTEGRAL: lambda p, s: p.consume_integral(_int_kind(s)),
    Op.INTEGRAL_IN_RANGE: lambda p, s: p.consume_integral_in_range(int(s.min), int(s.max), _int_kind(s)),
    Op.BOOL: lambda p, s: p.consume_bool(),
    Op.PICK: lambda p, s: p.pick_value_in_array(s.choices),
    Op.ENUM: _enum_member,
    Op.PROBABILITY: lambda p, s: p.consume_probability(_float_kind(s)),
    Op.FLOATING_POINT: lambda p, s: p.consume_floating_point(_float_kind(s)),
    Op.FLOATING_POINT_IN_RANGE: lambda p, s: p.consume_floating_point_in_range(
        float(s.min), float(s.max), _float_kind(s)
    ),
    Op.RANDOM_LENGTH_STRING: lambda p, s: p.consume_random_length_string(s.max_length),
    Op.INTEGRAL_LIST: lambda p, s: p.consume_integral_list(s.count, _int_kind(s)),
    Op.FLOATING_POINT_LIST: lambda p, s: p.consume_floating_point_list(s.count, _float_kind(s)),
}


# -----------------------------
# Plan execution
# -----------------------------

def run_step(p: Provider, step: DecodeStep, index: int) -> DecodedValue:
    front_before, back_before = p.cursor.span()
    try:
        value = _OPS[step.op](p, step)
    except ValueError as e:
        raise PlanError(f"step {index} ({step.op.value}) failed: {e}") from e
    front_after, back_after = p.cursor.span()
    return DecodedValue(
        index=index,
        name=step.name,
        op=step.op,
        value=value,
        front_before=front_before,
        back_before=back_before,
        front_after=front_after,
        back_after=back_after,
    )


def run_plan(data: BytesLike, plan: DecodePlan) -> DecodeTrace:
    """
    Apply ``plan`` to ``data`` and record every decoded value together with
    the cursor movement it caused.

    With ``plan.repeat > 1`` the step list is run again until the repeat
    count is reached or a full pass starts on an empty buffer.
    """
    raw = load_bytes(data)
    p = Provider(raw)
    trace = DecodeTrace(size=len(raw))
    logger.debug("running %d step(s) x%d over %d bytes", len(plan.steps), plan.repeat, len(raw))

    index = 0
    for rnd in range(plan.repeat):
        if rnd > 0 and p.remaining_bytes() == 0:
            logger.debug("buffer exhausted after %d pass(es)", rnd)
            break
        for step in plan.steps:
            trace.values.append(run_step(p, step, index))
            index += 1

    trace.remaining = p.remaining_bytes()
    logger.info("decoded %d value(s), %d byte(s) left", len(trace.values), trace.remaining)
    return trace
