"""Check references shared by the registries and the auditor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Check:
    """Reference to a check function by its fully qualified name."""

    target: str

    def __post_init__(self) -> None:
        if not isinstance(self.target, str) or not self.target:
            raise ValueError("Check target must be a non-empty string literal.")
        module_name, _, attr = self.target.rpartition(".")
        if not module_name or not attr:
            raise ValueError(f"Check target must be a dotted path, got {self.target!r}")

    @classmethod
    def __class_getitem__(cls, item: str) -> "Check":
        """Support the subscript form: Check["pkg.mod.fn"] -> Check(target=...)."""
        if not isinstance(item, str):
            raise TypeError(f"Check subscript must be a string, got {type(item)}")
        return cls(target=item)

    @classmethod
    def of(cls, func: object) -> "Check":
        """Build a Check that points at an importable function."""
        module = getattr(func, "__module__", None)
        qualname = getattr(func, "__qualname__", None)
        if not module or not qualname:
            raise TypeError(f"cannot derive a check target from {func!r}")
        return cls(target=f"{module}.{qualname}")


__all__ = ["Check"]
