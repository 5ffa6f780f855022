import copy
import threading
from dataclasses import dataclass, field
from enum import Enum

from duplicable import is_duplicable, not_duplicable


class TaskStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str
    status: TaskStatus
    tags: list[str] = field(default_factory=list)


@not_duplicable
class Worker:
    """Owns a thread lock, so copies would share it silently."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.lock = threading.Lock()


def snapshot(value):
    """Copy values that can be copied, pass the rest through."""
    return copy.copy(value) if is_duplicable(value) else value


if __name__ == "__main__":
    values = [
        None,
        True,
        42,
        TaskStatus.PENDING,
        Task,
        "write docs",
        ["a", "b"],
        Task("write docs", TaskStatus.PENDING, ["docs"]),
        Worker("alpha"),
    ]
    for value in values:
        kind = "copied" if is_duplicable(value) else "shared"
        held = snapshot(value)
        print(f"{held!r:60} -> {kind}")
