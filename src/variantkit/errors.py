class VariantError(Exception):
    pass


class ReservedNameError(VariantError, ValueError):
    """Raised when the catch-all name is used as an alternative."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'Variant key "{name}" is reserved for catch-all usage in match; '
            "it cannot name an alternative"
        )
        self.name = name


class CardinalityError(VariantError, ValueError):
    """Raised by parse when the mapping does not hold exactly one key."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Expected exactly 1 variant key, got {count}")
        self.count = count


class UnknownKeyError(VariantError, LookupError):
    def __init__(self, name: str, declared: tuple[str, ...] = ()) -> None:
        known = ", ".join(declared) if declared else "none"
        super().__init__(f'Unknown variant "{name}" (declared: {known})')
        self.name = name
        self.declared = declared


class NoHandlerError(VariantError, LookupError):
    def __init__(self, alternative: str) -> None:
        super().__init__(
            f'No handler for variant "{alternative}" and no "_" fallback'
        )
        self.alternative = alternative
