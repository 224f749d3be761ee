# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Undo history primitives — snapshots, the stack, and its lazy-init hook."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from beforehand.aop.advice import make_advice


@dataclass(frozen=True)
class Snapshot:
    """Names captured at one point in time."""

    first_name: str
    last_name: str


class UndoStack:
    """LIFO of snapshots; grows and shrinks only at the top."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        self._items.append(snapshot)

    def pop(self) -> Snapshot | None:
        """Remove and return the newest snapshot, or ``None`` when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"UndoStack(depth={len(self._items)})"


def ensure_undo_stack(receiver: Any, *args: Any, **kwargs: Any) -> None:
    """Give *receiver* an empty ``_undo_stack`` if it has none yet.

    An existing stack is left as is, contents included.
    """
    if getattr(receiver, "_undo_stack", None) is None:
        receiver._undo_stack = UndoStack()


with_undo_stack = make_advice([ensure_undo_stack])
