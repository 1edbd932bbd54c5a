from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from pydantic import ValidationError

from .binary.runner import PlanError, load_bytes, run_plan
from .models.plan import DecodePlan

logger = logging.getLogger(__name__)


def cmd_info(args):
    data = load_bytes(args.input)
    head = data[: args.head]
    print(f"size={len(data)}")
    print(f"head={head.hex(' ')}")
    return 0


def _trace(args):
    plan = DecodePlan.from_json(Path(args.plan))
    logger.debug("loaded plan %s with %d step(s)", args.plan, len(plan.steps))
    return run_plan(args.input, plan)


def cmd_decode(args):
    trace = _trace(args)
    out = json.dumps(trace.model_dump(mode="json"), indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(out)
    else:
        print(out)
    return 0


def cmd_plot(args):
    from .viz import plot_consumption
    plot_consumption(_trace(args))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="fuzzbytes", description="Decode typed values from fuzzer byte buffers")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print buffer size and leading bytes")
    sp.add_argument("input", help="Path to a corpus file")
    sp.add_argument("--head", type=int, default=16, help="Number of leading bytes to show")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("decode", help="run a JSON decode plan and print the trace as JSON")
    sp.add_argument("input", help="Path to a corpus file")
    sp.add_argument("plan", help="Path to a JSON decode plan")
    sp.add_argument("--output", default=None, help="Write the trace here instead of stdout")
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("plot", help="plot front/back consumption of a decode plan")
    sp.add_argument("input")
    sp.add_argument("plan")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except (PlanError, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
