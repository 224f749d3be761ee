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
"""Exception hierarchy for beforehand.

All library exceptions inherit from BeforehandException so callers can catch
the whole family at once, or a specific subclass for targeted handling.

Runtime errors raised by hooks or by a decorated body are never wrapped in
these types; they reach the caller exactly as raised.
"""

from __future__ import annotations


class BeforehandException(Exception):
    """Base exception for all beforehand errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "ADVICE_001").
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(BeforehandException):
    """Configuration could not be loaded or resolved."""


class ValidationException(BeforehandException):
    """Input validation failures."""


class InvalidAdviceException(ValidationException):
    """An advice was built from, or applied to, something that is not callable."""
