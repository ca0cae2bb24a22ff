"""Event types emitted during a generation run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunStarted:
    source_root: str
    output_root: str
    block_count: int


@dataclass(frozen=True)
class BlockStarted:
    block: str
    component_name: str


@dataclass(frozen=True)
class BlockWritten:
    block: str
    component_name: str
    path: str
    stylesheet_count: int


@dataclass(frozen=True)
class RunCompleted:
    output_root: str
    component_count: int


@dataclass(frozen=True)
class RunFailed:
    block: str | None
    error: str


GenerationEvent = RunStarted | BlockStarted | BlockWritten | RunCompleted | RunFailed
