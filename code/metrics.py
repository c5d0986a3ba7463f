"""Helpers for collecting instrumentation data during maze generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class PhaseMetrics:
    """Aggregated metrics for a single generation phase."""

    name: str
    invocations: int = 0
    total_time: float = 0.0
    total_items: int = 0

    def record(self, duration: float, items: int) -> None:
        self.invocations += 1
        self.total_time += duration
        self.total_items += items

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
            "total_items": self.total_items,
        }


@dataclass
class GenerationMetrics:
    """Container for phase timings and edge counters recorded during a generation run."""

    phases: Dict[str, PhaseMetrics] = field(default_factory=dict)
    candidates: int = 0
    skipped_out_of_bounds: int = 0
    merged: int = 0
    rejected_cycles: int = 0

    def record_phase(self, name: str, duration: float, items: int) -> None:
        metrics = self.phases.get(name)
        if metrics is None:
            metrics = PhaseMetrics(name=name)
            self.phases[name] = metrics
        metrics.record(duration, items)

    @property
    def total_time(self) -> float:
        return sum(metrics.total_time for metrics in self.phases.values())

    def snapshot(self) -> Dict[str, object]:
        return {
            "phases": {name: metrics.to_dict() for name, metrics in self.phases.items()},
            "candidates": self.candidates,
            "skipped_out_of_bounds": self.skipped_out_of_bounds,
            "merged": self.merged,
            "rejected_cycles": self.rejected_cycles,
        }
