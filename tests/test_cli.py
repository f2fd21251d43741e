"""
Tests for the report formatting and the command line entry point.
"""

import pytest

from roster_arranger.cli import build_parser, main
from roster_arranger.constants import Policy, Status
from roster_arranger.models import Rules
from roster_arranger.report import format_rank_totals, format_result, format_roster, format_rules
from roster_arranger.roster import Roster


class TestReport:
    """Tests for the text report."""

    def test_format_roster(self, trio: tuple[Roster, Roster]) -> None:
        """Members are numbered in name order."""
        left, _ = trio
        assert format_roster("ORIGINAL LEFT", left) == (
            "ORIGINAL LEFT\n"
            "1. Name: A, Group: 3, Rank: 23\n"
            "2. Name: B, Group: 3, Rank: 34"
        )

    def test_format_rules(self) -> None:
        """Exclusions print in the order given, or sorted."""
        rules = Rules(maximum_group_size=4, excluded_names={"Zed", "Amy"})
        assert format_rules(rules) == "RULES\nMaximum group size: 4\nExcluded: Amy, Zed"
        assert format_rules(rules, ["Zed", "Amy"]).endswith("Excluded: Zed, Amy")

    def test_rank_totals(self, trio: tuple[Roster, Roster]) -> None:
        """Rank sums of both sides."""
        assert format_rank_totals(*trio) == "Rank sum totals: [57/100]"

    def test_result_by_rank_has_totals(self, trio: tuple[Roster, Roster]) -> None:
        """Only BY_RANK results carry rank totals."""
        by_rank = format_result(Policy.BY_RANK, Status.SUCCESS, *trio)
        by_number = format_result(Policy.BY_NUMBER, Status.ALREADY_ARRANGED, *trio)

        assert "BY_RANK\nStatus: SUCCESS\n-----\nLEFT" in by_rank
        assert "Rank sum totals" in by_rank
        assert "Rank sum totals" not in by_number


class TestCli:
    """Tests for main()."""

    def test_parser_defaults(self) -> None:
        """Defaults run every policy on the sample dataset."""
        args = build_parser().parse_args([])
        assert args.dataset == "sample"
        assert args.policy is None
        assert args.exclude is None

    def test_default_run(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The default run arranges the sample by every policy."""
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith("START OF POLICY ENFORCED ARRANGEMENTS\n")
        assert "Excluded: Charlie, Del, Donna" in out
        for policy in Policy:
            assert f"\n{policy.value}\nStatus: SUCCESS\n" in out
        assert "Rank sum totals: [321/410]" in out

    def test_single_policy(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--policy limits the run."""
        assert main(["--policy", "BY_GROUP"]) == 0

        out = capsys.readouterr().out
        assert "Status: SUCCESS" in out
        assert "BY_NUMBER" not in out
        assert "Rank sum totals" not in out

    def test_validate_trio(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Validation passes on a dataset that is already balanced by number."""
        assert main(["--dataset", "trio", "--validate"]) == 0

        out = capsys.readouterr().out
        assert "Status: ALREADY_ARRANGED" in out
        assert "Validation passed" in out

    def test_missing_dataset(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown datasets fail with exit code 1."""
        assert main(["--dataset", "no-such-dataset"]) == 1
        assert "ERROR: Dataset not found" in capsys.readouterr().err

    def test_negative_group_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A negative group size limit is rejected."""
        assert main(["--max-group-size", "-1", "--policy", "BY_NUMBER"]) == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_exclude_override(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--exclude replaces the dataset's exclusions."""
        assert main(["--exclude", "Able", "--policy", "BY_NUMBER"]) == 0
        assert "Excluded: Able" in capsys.readouterr().out
