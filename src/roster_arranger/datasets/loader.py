"""
Dataset loader - discovers and loads roster datasets.

Datasets can come from:
1. Built-in library (shipped with package)
2. Project datasets (a user directory of *.yaml files)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from roster_arranger.datasets.models import Dataset

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


@dataclass(frozen=True)
class DatasetMetadata:
    """Lightweight metadata for listing datasets."""

    name: str
    path: Path
    description: str | None
    left_count: int
    right_count: int


class DatasetLoader:
    """
    Discovers and loads dataset definitions.

    Datasets are loaded from YAML files in the library and project directories.
    Project datasets override library datasets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the dataset loader.

        Args:
            library_path: Path to built-in dataset library
            project_path: Path to project datasets directory
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._cache: dict[str, Dataset] = {}

    def list_datasets(self) -> list[DatasetMetadata]:
        """
        List all available datasets, project ones taking precedence.

        Files that fail to parse are skipped with a warning.
        """
        found: dict[str, DatasetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                try:
                    dataset = self.load(path)
                except (OSError, yaml.YAMLError, ValidationError, KeyError) as e:
                    logger.warning(f"Skipping dataset {path}: {e}")
                    continue
                found[dataset.name] = DatasetMetadata(
                    name=dataset.name,
                    path=path,
                    description=dataset.description,
                    left_count=len(dataset.left),
                    right_count=len(dataset.right),
                )

        return sorted(found.values(), key=lambda m: m.name)

    def get_dataset(self, name: str) -> Dataset | None:
        """
        Get a dataset by name.

        Project datasets take precedence over library datasets.

        Args:
            name: Dataset name (file stem)

        Returns:
            Dataset if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                dataset = self.load(path)
                self._cache[name] = dataset
                return dataset

        return None

    def resolve(self, name_or_path: str) -> Dataset:
        """
        Load a dataset from a file path or by name.

        Raises:
            FileNotFoundError: If neither a file nor a named dataset exists
        """
        path = Path(name_or_path)
        if path.suffix in (".yaml", ".yml") and path.is_file():
            return self.load(path)

        dataset = self.get_dataset(name_or_path)
        if dataset is None:
            raise FileNotFoundError(f"Dataset not found: {name_or_path}")
        return dataset

    def load(self, path: Path) -> Dataset:
        """
        Load a dataset from a YAML file.

        Raises:
            ValidationError: If the file does not match the dataset schema
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        dataset = Dataset.from_yaml_dict(data)
        logger.debug(f"Loaded dataset {dataset.name!r} from {path}")
        return dataset

    def save(self, dataset: Dataset) -> Path:
        """
        Write a dataset into the project directory.

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        safe_name = dataset.name.replace(" ", "_").replace("/", "_")
        path = self.project_path / f"{safe_name}.yaml"

        with open(path, "w") as f:
            yaml.safe_dump(dataset.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache[dataset.name] = dataset
        return path

    def clear_cache(self) -> None:
        """Clear the dataset cache."""
        self._cache.clear()
