from __future__ import annotations

from typing import Any

from .builder import UnionBuilder
from .variant import VariantValue


class Option(UnionBuilder):
    """
    Builder over ``{Some: T, None: absent}``.

    ``None`` is a Python keyword, so the attribute form ``opt.None()`` is not
    available; use ``opt.none()`` or ``opt["None"]()``.
    """

    def __init__(self, payload_type: Any = object, *, strict: bool = True, log: bool = False) -> None:
        super().__init__({"Some": payload_type, "None": None}, strict=strict, log=log)

    def some(self, value: Any) -> VariantValue:
        return self.construct("Some", value)

    def none(self) -> VariantValue:
        return self.construct("None")


class Result(UnionBuilder):
    """Builder over ``{Ok: T, Err: E}``."""

    def __init__(
            self,
            ok_type: Any = object,
            err_type: Any = object,
            *,
            strict: bool = True,
            log: bool = False,
        ) -> None:
        super().__init__({"Ok": ok_type, "Err": err_type}, strict=strict, log=log)

    def ok(self, value: Any) -> VariantValue:
        return self.construct("Ok", value)

    def err(self, error: Any) -> VariantValue:
        return self.construct("Err", error)
