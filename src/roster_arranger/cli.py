#!/usr/bin/env python3
"""
Entry point for the roster arranger.

Loads a dataset, prints the original rosters and rules, then arranges
fresh copies of the original rosters once per policy and prints each
result.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from roster_arranger.arrangement import PolicyEnforcer, validate_arrangement
from roster_arranger.constants import Policy
from roster_arranger.datasets import DatasetLoader
from roster_arranger.exceptions import RosterError
from roster_arranger.models.rules import Rules
from roster_arranger.registry import EntityStore
from roster_arranger.report import SEPARATOR, format_result, format_roster, format_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Arrange two rosters by policy")
    parser.add_argument(
        "--dataset",
        default="sample",
        help="Dataset name or path to a dataset YAML file (default: sample)",
    )
    parser.add_argument(
        "--policy",
        action="append",
        choices=[p.value for p in Policy],
        help="Policy to apply; repeat for several (default: all three)",
    )
    parser.add_argument(
        "--max-group-size",
        type=int,
        default=None,
        help="Override the dataset's maximum group size",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        help="Name to pin to its starting roster; repeat for several (replaces dataset exclusions)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check each result against its policy and print any issues",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Run the arrangements described by parsed arguments."""
    dataset = DatasetLoader().resolve(args.dataset)
    if args.max_group_size is not None:
        dataset.rules.maximum_group_size = args.max_group_size
    if args.exclude is not None:
        dataset.rules.excluded = list(args.exclude)

    store = EntityStore()
    left, right, rules = dataset.build(store)
    policies = [Policy(p) for p in args.policy] if args.policy else list(Policy)

    print("START OF POLICY ENFORCED ARRANGEMENTS\n")
    print(format_roster("ORIGINAL LEFT", left))
    print(format_roster("ORIGINAL RIGHT", right))
    print(format_rules(rules, dataset.rules.excluded))
    print(SEPARATOR)

    exit_code = 0
    for policy in policies:
        # The enforcer owns its rosters, so every policy gets fresh copies
        enforcer = PolicyEnforcer(policy, _copy_rules(rules), left.copy(), right.copy())
        status = enforcer.arrange()
        print(format_result(policy, status, enforcer.left_final, enforcer.right_final))

        if args.validate:
            result = validate_arrangement(enforcer)
            print(str(result))
            if not result.is_valid:
                exit_code = 1

    return exit_code


def _copy_rules(rules: Rules) -> Rules:
    """Independent rules per enforcer."""
    return Rules(
        maximum_group_size=rules.maximum_group_size,
        excluded_names=set(rules.excluded_names),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return run(args)
    except (RosterError, ValidationError, FileNotFoundError) as e:
        logger.exception("Arrangement failed")
        print(f"\n\nERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
