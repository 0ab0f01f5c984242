#!/usr/bin/env python3
"""Entry point: python scripts/run.py --name Jules --capacity 3 --others "Adam Betty Frank Mike" """

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from courtwait.cohort import parse_cohort
from courtwait.config import load_config
from courtwait.docket import docket_wait_times, summarize
from courtwait.scheduler import build_scheduler


def main():
    parser = argparse.ArgumentParser(description="Court hearing wait time")
    parser.add_argument("--config", type=str, default=str(ROOT / "configs" / "default.yaml"), help="Path to YAML config")
    parser.add_argument("--name", type=str, help="Your name")
    parser.add_argument("--capacity", type=int, help="Number of judges (overrides config)")
    parser.add_argument("--others", type=str, default="", help="Space-separated names of everyone else")
    parser.add_argument("--slot-duration", type=float, help="Length of one round (overrides config)")
    parser.add_argument("--docket", action="store_true", help="Print the wait for everyone, not just --name")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    cfg = load_config(args.config)
    logging.getLogger().setLevel(cfg.get("logging", {}).get("level", "INFO"))

    sched_cfg = cfg.setdefault("schedule", {})
    if args.capacity is not None:
        sched_cfg["capacity"] = args.capacity
    if args.slot_duration is not None:
        sched_cfg["slot_duration"] = args.slot_duration

    try:
        scheduler = build_scheduler(cfg)
        others = parse_cohort(args.others)
    except ValueError as e:
        parser.error(str(e))

    if args.docket:
        names = others + ([args.name] if args.name is not None else [])
        entries = docket_wait_times(names, scheduler.capacity, scheduler.slot_duration)
        for e in entries:
            print(f"{e.name}\trank={e.rank}\tround={e.round}\twait={e.wait_time:g}")
        stats = summarize(entries, cfg.get("docket", {}).get("percentiles", (10, 50, 90)))
        if stats is not None:
            print(f"\nRounds: {stats.rounds}")
            print(f"Mean wait: {stats.mean_wait:.1f}")
            for p, v in stats.wait_percentiles.items():
                print(f"p{p:g} wait: {v:.1f}")
            print(f"Last hearing ends at: {stats.total_time:g}")
        return

    if args.name is None:
        parser.error("--name is required unless --docket is given")
    print(f"{scheduler.wait_time(args.name, others):g}")


if __name__ == "__main__":
    main()
