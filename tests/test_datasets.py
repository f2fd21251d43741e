"""
Tests for datasets and the dataset loader.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from roster_arranger.datasets import Dataset, DatasetLoader, MemberSpec, RulesSpec
from roster_arranger.exceptions import DuplicateNameError
from roster_arranger.registry import EntityStore


def write_yaml(path: Path, data: dict) -> Path:
    """Write a dict as YAML."""
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path


class TestDataset:
    """Tests for the Dataset model."""

    def test_from_yaml_dict(self) -> None:
        """Parse the canonical YAML dict."""
        dataset = Dataset.from_yaml_dict(
            {
                "name": "tiny",
                "rules": {"maximum_group_size": 3, "excluded": ["a"]},
                "left": [{"name": "a", "group": 1, "rank": 10}],
                "right": [{"name": "b", "group": 2, "rank": 20}],
            }
        )
        assert dataset.name == "tiny"
        assert dataset.rules.maximum_group_size == 3
        assert dataset.left == [MemberSpec(name="a", group=1, rank=10)]

    def test_defaults(self) -> None:
        """Missing rules use the defaults."""
        dataset = Dataset.from_yaml_dict({"name": "bare"})
        assert dataset.rules == RulesSpec()
        assert dataset.rules.maximum_group_size == 5
        assert dataset.left == []

    def test_invalid_rank(self) -> None:
        """Ranks are validated by the schema."""
        with pytest.raises(ValidationError):
            Dataset.from_yaml_dict(
                {"name": "bad", "left": [{"name": "a", "group": 1, "rank": 0}]}
            )

    def test_duplicate_names(self) -> None:
        """Names must be unique across both sides."""
        with pytest.raises(ValidationError):
            Dataset(
                name="dup",
                left=[MemberSpec(name="a", group=1, rank=10)],
                right=[MemberSpec(name="a", group=2, rank=20)],
            )

    def test_build(self, store: EntityStore) -> None:
        """Building fills rosters, then applies exclusions."""
        dataset = Dataset(
            name="tiny",
            rules=RulesSpec(maximum_group_size=1, excluded=["a"]),
            left=[MemberSpec(name="a", group=1, rank=10), MemberSpec(name="b", group=1, rank=20)],
            right=[MemberSpec(name="c", group=2, rank=30)],
        )

        left, right, rules = dataset.build(store)

        assert left.members == ("a", "b")
        assert right.members == ("c",)
        assert store.lookup("b").group == 2
        assert rules.maximum_group_size == 1
        assert rules.is_excluded("a")

    def test_build_twice_same_store(self, store: EntityStore) -> None:
        """A store can only hold one copy of a dataset."""
        dataset = Dataset(name="tiny", left=[MemberSpec(name="a", group=1, rank=10)])
        dataset.build(store)
        with pytest.raises(DuplicateNameError):
            dataset.build(store)

    def test_yaml_dict_shape(self) -> None:
        """to_yaml_dict writes the documented keys."""
        dataset = Dataset(name="tiny", left=[MemberSpec(name="a", group=1, rank=10)])
        data = dataset.to_yaml_dict()
        assert data["schema"] == "roster-dataset/v1"
        assert data["left"] == [{"name": "a", "group": 1, "rank": 10}]
        assert Dataset.from_yaml_dict(data) == dataset


class TestDatasetLoader:
    """Tests for DatasetLoader."""

    def test_library_lists_bundled(self) -> None:
        """The bundled library has the sample and trio datasets."""
        names = [m.name for m in DatasetLoader().list_datasets()]
        assert "sample" in names
        assert "trio" in names

    def test_sample_contents(self) -> None:
        """The sample dataset has 4 + 10 members and three exclusions."""
        dataset = DatasetLoader().get_dataset("sample")
        assert len(dataset.left) == 4
        assert len(dataset.right) == 10
        assert dataset.rules.excluded == ["Charlie", "Del", "Donna"]
        assert dataset.rules.maximum_group_size == 5

    def test_missing(self) -> None:
        """Unknown names return None."""
        assert DatasetLoader().get_dataset("does-not-exist") is None

    def test_resolve_path(self, temp_dir: Path) -> None:
        """resolve() accepts a file path."""
        path = write_yaml(
            temp_dir / "mine.yaml",
            {"name": "mine", "left": [{"name": "x", "group": 0, "rank": 1}]},
        )
        assert DatasetLoader().resolve(str(path)).name == "mine"

    def test_resolve_missing(self) -> None:
        """resolve() raises when nothing matches."""
        with pytest.raises(FileNotFoundError):
            DatasetLoader().resolve("nothing-here")

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        """Project datasets shadow library datasets of the same name."""
        write_yaml(temp_dir / "sample.yaml", {"name": "sample", "description": "mine"})
        loader = DatasetLoader(project_path=temp_dir)

        assert loader.get_dataset("sample").description == "mine"
        listed = {m.name: m for m in loader.list_datasets()}
        assert listed["sample"].description == "mine"
        assert listed["sample"].left_count == 0

    def test_list_skips_broken_files(self, temp_dir: Path) -> None:
        """Files that do not parse are skipped."""
        (temp_dir / "broken.yaml").write_text("left: [{name: a, rank: 500, group: 1}]\nname: broken\n")
        loader = DatasetLoader(library_path=temp_dir)
        assert loader.list_datasets() == []

    def test_save_and_load(self, temp_dir: Path) -> None:
        """Saved datasets can be loaded back."""
        loader = DatasetLoader(project_path=temp_dir / "datasets")
        dataset = Dataset(name="saved", right=[MemberSpec(name="r", group=3, rank=40)])

        path = loader.save(dataset)

        assert path.exists()
        assert loader.load(path) == dataset

    def test_save_needs_project(self) -> None:
        """Saving requires a project path."""
        with pytest.raises(ValueError):
            DatasetLoader().save(Dataset(name="x"))
