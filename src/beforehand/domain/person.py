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
"""Person — a renameable entity with undo."""

from __future__ import annotations

import logging

from beforehand.domain.undo import Snapshot, UndoStack, with_undo_stack

logger = logging.getLogger(__name__)


class Person:
    """A person whose name changes can be undone.

    The undo stack does not exist until the first ``rename`` or ``undo``;
    both methods carry the ``with_undo_stack`` advice, which creates it on
    demand so neither body has to.
    """

    def __init__(self, first_name: str, last_name: str) -> None:
        self._first_name = first_name
        self._last_name = last_name
        self._undo_stack: UndoStack | None = None

    def rename(self, first: str, last: str) -> Person:
        self._undo_stack.push(Snapshot(self._first_name, self._last_name))  # type: ignore[union-attr]
        self._first_name = first
        self._last_name = last
        logger.debug("Renamed person to '%s %s'", first, last)
        return self

    def undo(self) -> Person:
        snapshot = self._undo_stack.pop()  # type: ignore[union-attr]
        if snapshot is None:
            logger.debug("Nothing to undo")
            return self
        self._first_name = snapshot.first_name
        self._last_name = snapshot.last_name
        return self

    rename = with_undo_stack(rename)
    undo = with_undo_stack(undo)

    def full_name(self) -> str:
        return self._first_name + " " + self._last_name

    def can_undo(self) -> bool:
        """True when at least one rename can be reverted."""
        return self._undo_stack is not None and len(self._undo_stack) > 0

    def __repr__(self) -> str:
        return f"Person(first_name={self._first_name!r}, last_name={self._last_name!r})"
