from __future__ import annotations

import inspect
import keyword
import logging
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from .errors import CardinalityError, ReservedNameError, UnknownKeyError
from .util import CATCH_ALL, UNIT, is_absent
from .variant import VariantValue

logger = logging.getLogger(__name__)

_MISSING = object()


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"Variant name must be a non-empty identifier, got {name!r}")
    if name == CATCH_ALL:
        raise ReservedNameError(name)
    return name


class UnionBuilder:

    '''
    constructors for one closed set of alternatives
    '''

    def __init__(
            self,
            schema: Mapping[str, Any],
            *,
            strict: bool = True,
            log: bool = False,
        ) -> None:
        self._schema = MappingProxyType({_check_name(n): t for n, t in schema.items()})
        self._names = tuple(self._schema)
        self.strict = strict
        self.log = log

        # attribute constructors only where they cannot shadow the builder api
        for name in self._names:
            if keyword.iskeyword(name) or hasattr(self, name):
                continue
            self.__dict__[name] = self._constructor(name)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._schema

    @property
    def value_type(self) -> type[VariantValue]:
        return VariantValue

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, value: object) -> bool:
        if isinstance(value, VariantValue):
            return value.alternative in self._schema
        return value in self._schema

    def __getitem__(self, name: str) -> Callable[..., VariantValue]:
        self._declared(name)
        return self._constructor(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._names)})"

    def _declared(self, name: str) -> None:
        if name == CATCH_ALL:
            raise ReservedNameError(name)
        if name not in self._schema:
            raise UnknownKeyError(name, self._names)

    def _constructor(self, name: str) -> Callable[..., VariantValue]:
        def construct(payload: Any = _MISSING) -> VariantValue:
            return self.construct(name, payload)
        construct.__name__ = construct.__qualname__ = name
        return construct

    def _normalize(self, name: str, payload: Any) -> Any:
        if name in self._schema and is_absent(self._schema[name]):
            return UNIT
        return payload

    def construct(self, name: str, payload: Any = _MISSING) -> VariantValue:
        self._declared(name)
        if not is_absent(self._schema[name]) and (payload is _MISSING or payload is UNIT):
            raise TypeError(f"{name}() missing required payload")
        return VariantValue(name, self._normalize(name, payload), self._names)

    def parse(self, data: Mapping[str, Any]) -> VariantValue:
        """
        Rebuild a value from its unwrapped form, a mapping with exactly one
        key naming the alternative.
        """
        keys = list(data.keys())
        if len(keys) != 1:
            raise CardinalityError(len(keys))

        name = keys[0]
        if name == CATCH_ALL:
            raise ReservedNameError(name)
        if name not in self._schema:
            if self.strict:
                raise UnknownKeyError(name, self._names)
            if self.log:
                logger.warning("parsed undeclared variant %r (declared: %s)", name, self._names)

        if self.log:
            logger.debug("parse %r -> %s", dict(data), name)
        return VariantValue(name, self._normalize(name, data[name]), self._names)


def union(
    cls: type | None = None,
    *,
    strict: bool = True,
    log: bool = False,
) -> Any:
    """
    Class decorator turning annotations into a UnionBuilder.

    Usage:
    @union
    class Shape:
        Circle: float
        Empty: None

    @union(strict=False, log=True)
    class Event: ...
    """
    def decorator(c: type) -> UnionBuilder:
        schema = inspect.get_annotations(c, eval_str=True)
        return UnionBuilder(schema, strict=strict, log=log)

    if cls is None:
        return decorator
    return decorator(cls)
