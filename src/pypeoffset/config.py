"""
YAML job files for batch offset calculations.

A job file lists offsets to calculate, with optional global settings:

    version: "1.0"
    settings:
      precision: 2
    jobs:
      - id: drain-45
        description: Drain line offset
        offset_distance: 100
        angle: 45
        pipe_diameter: 10
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .offset_calculator import OffsetParameters
from .report import DEFAULT_PRECISION


@dataclass
class JobSettings:
    """
    Settings shared by all jobs in a file.

    Attributes:
        precision: Decimal places shown in reports and diagram labels
    """

    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")


@dataclass
class OffsetJob:
    """
    A single named offset calculation.

    Values are kept as loaded; they are validated when the job is calculated
    so one bad job does not prevent loading the rest of the file.
    """

    id: str
    offset_distance: float
    angle: float
    pipe_diameter: float | None = None
    description: str = ""

    def __post_init__(self):
        # YAML may load a numeric id
        self.id = str(self.id)
        # The id names the job's diagram file
        if not self.id.strip() or "/" in self.id or "\\" in self.id or ".." in self.id:
            raise ValueError(
                f"Invalid job id: {self.id!r}. Ids must be non-empty and contain no '/', '\\' or '..'"
            )

    def to_parameters(self) -> OffsetParameters:
        return OffsetParameters(
            offset_distance=self.offset_distance,
            angle=self.angle,
            pipe_diameter=self.pipe_diameter,
        )


@dataclass
class OffsetJobFile:
    """
    Root of a job file.

    Attributes:
        version: File format version (currently "1.0")
        settings: Shared settings
        jobs: Offsets to calculate, in file order
    """

    version: str = "1.0"
    settings: JobSettings = field(default_factory=JobSettings)
    jobs: list[OffsetJob] = field(default_factory=list)

    def __post_init__(self):
        # Handle nested dicts from YAML
        if self.settings is None:
            self.settings = JobSettings()
        elif isinstance(self.settings, dict):
            self.settings = JobSettings(**self.settings)
        elif not isinstance(self.settings, JobSettings):
            raise ValueError(f"settings must be a mapping, got {self.settings!r}")

        if self.jobs is None:
            self.jobs = []
        elif not isinstance(self.jobs, list):
            raise ValueError(f"jobs must be a list, got {self.jobs!r}")
        jobs = []
        for index, job in enumerate(self.jobs):
            if isinstance(job, dict):
                job = OffsetJob(**job)
            elif not isinstance(job, OffsetJob):
                raise ValueError(f"Job {index + 1} must be a mapping, got {job!r}")
            jobs.append(job)
        self.jobs = jobs

        seen: set[str] = set()
        for job in self.jobs:
            if job.id in seen:
                raise ValueError(f"Duplicate job id: {job.id}")
            seen.add(job.id)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "OffsetJobFile":
        """Load a job file."""
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Job file must contain a mapping at the top level: {yaml_path}")
        version = data.get("version")
        data["version"] = "1.0" if version is None else str(version)
        return cls(**data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save the job file."""
        with open(yaml_path, "w") as f:
            yaml.dump(self._to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "settings": {"precision": self.settings.precision},
            "jobs": [self._job_to_dict(j) for j in self.jobs],
        }

    def _job_to_dict(self, job: OffsetJob) -> dict[str, Any]:
        result: dict[str, Any] = {"id": job.id}
        if job.description:
            result["description"] = job.description
        result["offset_distance"] = job.offset_distance
        result["angle"] = job.angle
        if job.pipe_diameter is not None:
            result["pipe_diameter"] = job.pipe_diameter
        return result
