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
"""Before advice — wraps a callable so an ordered list of hooks runs first."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from beforehand.aop.types import HOOKS_ATTR, F, HookFunction
from beforehand.kernel.exceptions import InvalidAdviceException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Advice:
    """An immutable, ordered sequence of hooks to run before a method body.

    Calling an ``Advice`` on a callable returns a decorated callable with the
    same calling convention.  On every invocation each hook is called with the
    same arguments (the receiver first, for methods), in order, and then the
    original body runs and its result is returned unchanged.

    A hook that raises aborts the remaining hooks and the original body; the
    exception reaches the caller as raised.

    Usage::

        log_calls = make_advice([audit, ensure_session])

        class Account:
            def _withdraw(self, amount): ...
            withdraw = log_calls(_withdraw)
    """

    hooks: tuple[HookFunction, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "hooks", tuple(self.hooks))
        for position, hook in enumerate(self.hooks):
            if not callable(hook):
                raise InvalidAdviceException(
                    f"Hook at position {position} is not callable: {hook!r}",
                    code="ADVICE_001",
                    context={"position": position},
                )

    def __call__(self, original: F) -> F:
        # Wrap the underlying function and keep the descriptor's binding rules.
        if isinstance(original, (staticmethod, classmethod)):
            return type(original)(self(original.__func__))  # type: ignore[return-value]

        if not callable(original):
            raise InvalidAdviceException(
                f"Advice can only be applied to a callable, got {original!r}",
                code="ADVICE_002",
                context={"target": repr(original)},
            )

        method_name = getattr(original, "__qualname__", repr(original))
        if inspect.iscoroutinefunction(original):
            wrapper = _build_async_wrapper(original, self.hooks, method_name)
        else:
            async_hooks = [hook for hook in self.hooks if inspect.iscoroutinefunction(hook)]
            if async_hooks:
                raise InvalidAdviceException(
                    f"Coroutine hooks cannot run before the sync callable '{method_name}'",
                    code="ADVICE_003",
                    context={"target": method_name, "hooks": [repr(hook) for hook in async_hooks]},
                )
            wrapper = _build_sync_wrapper(original, self.hooks, method_name)

        # functools.wraps copied the inner chain; prepend ours so outer runs first.
        setattr(wrapper, HOOKS_ATTR, self.hooks + advice_chain(original))
        logger.debug("Applied %d before hook(s) to '%s'", len(self.hooks), method_name)
        return wrapper  # type: ignore[return-value]


def make_advice(hooks: Iterable[HookFunction]) -> Advice:
    """Build an :class:`Advice` from an ordered iterable of hooks.

    An empty iterable yields a passthrough decorator.
    """
    return Advice(tuple(hooks))


def before(*hooks: HookFunction) -> Advice:
    """Varargs shorthand for :func:`make_advice`."""
    return Advice(hooks)


def advice_chain(fn: Any) -> tuple[HookFunction, ...]:
    """Return every hook wrapped around *fn*, in execution order.

    Works on plain functions and on bound methods.  Undecorated callables
    have an empty chain.
    """
    return tuple(getattr(fn, HOOKS_ATTR, ()))


def _build_sync_wrapper(original: Any, hooks: tuple[HookFunction, ...], method_name: str) -> Any:
    """Build a sync wrapper that runs *hooks* and then *original*."""

    @functools.wraps(original)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger.debug("Running %d before hook(s) for '%s'", len(hooks), method_name)
        for hook in hooks:
            hook(*args, **kwargs)
        return original(*args, **kwargs)

    return wrapper


def _build_async_wrapper(original: Any, hooks: tuple[HookFunction, ...], method_name: str) -> Any:
    """Build an async wrapper; awaitable hook results finish before the next step."""

    @functools.wraps(original)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger.debug("Running %d before hook(s) for '%s'", len(hooks), method_name)
        for hook in hooks:
            result = hook(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        return await original(*args, **kwargs)

    return wrapper
