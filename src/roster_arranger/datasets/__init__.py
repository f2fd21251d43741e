"""
Datasets - starting rosters and rules, stored as YAML.
"""

from roster_arranger.datasets.loader import DatasetLoader, DatasetMetadata
from roster_arranger.datasets.models import Dataset, MemberSpec, RulesSpec

__all__ = [
    "Dataset",
    "DatasetLoader",
    "DatasetMetadata",
    "MemberSpec",
    "RulesSpec",
]
