# main_integration.py
# -----------------------------------------------------------------------------
# CLI entry-point for magnetic conveyor sizing:
#   • Parse command-line args
#   • Load conveyor input records from YAML
#   • Run the master calculation per record
#   • Print geometry / drive / throughput tables and validation messages
#   • Optional JSON output
# -----------------------------------------------------------------------------
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from pprint import pprint
from typing import List, Optional

from config import load_inputs
from formulas import ConveyorOutputs, calculate

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# 0) Argument parsing
# -----------------------------------------------------------------------------
def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser("magnetic conveyor calculator")

    p.add_argument(
        "inputs",
        nargs="?",
        type=Path,
        default=Path("inputs.yaml"),
        help="Path to inputs.yaml (default: ./inputs.yaml)",
    )
    p.add_argument("--out", type=Path, default=None,
                   help="Write full JSON results to this path, if given")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Log every pipeline step")

    return p.parse_args(argv)

# -----------------------------------------------------------------------------
# 1) Tables
# -----------------------------------------------------------------------------
def _print_summary(idx: int, res: ConveyorOutputs) -> None:
    print(f"\n=== Conveyor {idx} ===")

    hdr1 = "incline[in]  run[in]  horiz[in]  belt[ft]  chain[in]  magnets"
    print(hdr1)
    print("-" * len(hdr1))
    print(
        f"{res.incline_length_in:11.2f} "
        f"{res.incline_run_in:8.2f} "
        f"{res.horizontal_length_in:10.2f} "
        f"{res.belt_length_ft:9.2f} "
        f"{res.chain_length_in:10.1f} "
        f"{res.qty_magnets:8d}"
    )

    hdr2 = "load[lb]  pull[lb]  torque[in·lb]  rpm     ratio"
    print(hdr2)
    print("-" * len(hdr2))
    print(
        f"{res.total_load_lb:8.1f} "
        f"{res.total_belt_pull_lb:9.1f} "
        f"{res.total_torque_in_lb:14.1f} "
        f"{res.required_rpm:7.2f} "
        f"{res.suggested_gear_ratio:8.2f}"
    )

    print(
        f"Bar {res.bar_capacity_lb:.3f} lb "
        f"({res.bar_ceramic_count} ceramic / {res.bar_neo_count} neo) – "
        f"achieved {res.achieved_throughput_lbs_hr:,.0f} lb/hr, "
        f"margin {res.throughput_margin:.2f}"
    )

    for m in res.errors:
        print(f"  [ERROR]   {m.code}: {m.message} ({m.field})")
    for m in res.warnings:
        print(f"  [WARNING] {m.code}: {m.message} ({m.field})")

# -----------------------------------------------------------------------------
# 2) Main driver
# -----------------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> List[ConveyorOutputs]:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    print("\n=== CLI arguments ===")
    pprint(vars(args))

    records = load_inputs(args.inputs)
    logger.info(f"Loaded {len(records)} conveyor input record(s) from {args.inputs}")

    results = [calculate(rec) for rec in records]
    for i, res in enumerate(results, 1):
        _print_summary(i, res)

    if args.out:
        out_data = {
            "source": str(args.inputs),
            "results": [r.to_dict() for r in results],
        }
        args.out.write_text(json.dumps(out_data, indent=2))
        print(f"\nSaved full results → {args.out}")

    return results


if __name__ == "__main__":
    main()
