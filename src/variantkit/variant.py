from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Awaitable, Callable, Mapping

from .errors import NoHandlerError, ReservedNameError, UnknownKeyError
from .util import (
    CATCH_ALL,
    UNIT,
    Handler,
    call_with_payload,
    is_unit,
    or_default,
    settle,
)


class Branches:
    """
    One callable per declared alternative, reachable as an attribute
    (``v.if_.Some``) or by name (``v.if_["None"]``) for keyword names.
    """

    def __init__(self, names: tuple[str, ...], bind: Callable[[str], Callable[..., Any]]) -> None:
        for name in names:
            self.__dict__[name] = bind(name)

    def __getitem__(self, name: str) -> Callable[..., Any]:
        try:
            return self.__dict__[name]
        except KeyError:
            raise UnknownKeyError(name, tuple(self.__dict__)) from None

    def __contains__(self, name: object) -> bool:
        return name in self.__dict__

    def __dir__(self) -> list[str]:
        return list(self.__dict__)

    def __repr__(self) -> str:
        return f"Branches({', '.join(self.__dict__)})"


@dataclass(frozen=True, slots=True, repr=False)
class VariantValue:
    """
    Exactly one alternative and its payload.

    ``names`` lists the alternatives this value may be asked about. matches,
    matches_not, if_ and if_not raise UnknownKeyError for any other name
    instead of answering False/True. A value built directly, without a
    builder, only knows its own alternative, so
    ``VariantValue("A", 1).matches("B")`` raises.
    """

    alternative: str
    payload: Any = UNIT
    names: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.alternative == CATCH_ALL:
            raise ReservedNameError(self.alternative)
        if self.alternative not in self.names:
            object.__setattr__(self, "names", self.names + (self.alternative,))

    def __repr__(self) -> str:
        if is_unit(self.payload):
            return f"{self.alternative}()"
        return f"{self.alternative}({self.payload!r})"

    def key(self) -> str:
        return self.alternative

    def unwrap(self) -> dict[str, Any]:
        return {self.alternative: self.payload}

    def _check(self, name: str) -> None:
        if name not in self.names:
            raise UnknownKeyError(name, self.names)

    def matches(
        self,
        name: str,
        on_match: Handler[Any] | None = None,
        on_else: Handler[Any] | None = None,
    ) -> Any:
        """
        True when this value holds ``name``.

        With callbacks the branch that fires is invoked: ``on_match`` gets the
        payload, ``on_else`` gets the unwrapped mapping. A callback result
        replaces the boolean unless it is None.
        """
        self._check(name)
        if name == self.alternative:
            if on_match is None:
                return True
            return or_default(call_with_payload(on_match, self.payload), True)
        if on_else is None:
            return False
        return or_default(on_else(self.unwrap()), False)

    def matches_not(
        self,
        name: str,
        on_else: Handler[Any] | None = None,
        on_match: Handler[Any] | None = None,
    ) -> Any:
        """Complement of matches. Both callbacks receive the unwrapped mapping."""
        self._check(name)
        if name != self.alternative:
            if on_else is None:
                return True
            return or_default(on_else(self.unwrap()), True)
        if on_match is None:
            return False
        return or_default(on_match(self.unwrap()), False)

    @property
    def if_(self) -> Branches:
        return Branches(self.names, partial(partial, self.matches))

    @property
    def if_not(self) -> Branches:
        return Branches(self.names, partial(partial, self.matches_not))

    def _select(
        self,
        handlers: Mapping[str, Handler[Any]] | None,
        extra: Mapping[str, Handler[Any]],
    ) -> Callable[[], Any]:
        table = {**(handlers or {}), **extra}
        fn = table.get(self.alternative)
        if fn is not None:
            return partial(call_with_payload, fn, self.payload)
        fallback = table.get(CATCH_ALL)
        if fallback is not None:
            return fallback
        raise NoHandlerError(self.alternative)

    def match(
        self,
        handlers: Mapping[str, Handler[Any]] | None = None,
        /,
        **extra: Handler[Any],
    ) -> Any:
        """
        Run exactly one handler: the one keyed by the held alternative,
        else the ``_`` catch-all, else raise NoHandlerError.
        """
        return self._select(handlers, extra)()

    def match_async(
        self,
        handlers: Mapping[str, Handler[Any]] | None = None,
        /,
        **extra: Handler[Any],
    ) -> Awaitable[Any]:
        # handler is chosen (or NoHandlerError raised) before anything is awaited
        run = self._select(handlers, extra)

        async def dispatch() -> Any:
            return await settle(run())

        return dispatch()
