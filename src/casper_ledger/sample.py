from dataclasses import dataclass, replace
from typing import Generic, Tuple, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Sample(Generic[V]):
    label: str
    sample: V
    valid: bool = True

    def destructure(self) -> Tuple[str, V, bool]:
        return self.label, self.sample, self.valid

    def add_label(self, label: str) -> "Sample[V]":
        return replace(self, label=f"{self.label}-{label}")
