"""Trajectory v1.0 — CLI entry point."""

import argparse
import logging
from dataclasses import replace

from trajectory import TrajectoryConfig, evaluate_many, generate_report, load_habits


def main(argv=None):
    parser = argparse.ArgumentParser(description="Project habit outcomes five years forward.")
    parser.add_argument("habits", nargs="?", default="sample_habits.json",
                        help="JSON file with one habit object or a list of them")
    parser.add_argument("--base-year", type=int, default=None,
                        help="first projection year (default: current year)")
    parser.add_argument("--json", action="store_true", help="print metrics as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    cfg = TrajectoryConfig()
    if args.base_year is not None:
        cfg = replace(cfg, projection=replace(cfg.projection, base_year=args.base_year))

    for metrics in evaluate_many(load_habits(args.habits), cfg):
        print(metrics.to_json() if args.json else generate_report(metrics))


if __name__ == "__main__":
    main()
