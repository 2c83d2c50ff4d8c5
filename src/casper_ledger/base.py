from dataclasses import dataclass, replace
from enum import Enum


class LedgerError(Exception):
    pass


class LabelTooLongError(LedgerError):
    pass


class MissingArgumentError(LedgerError):
    pass


class InvalidArgumentError(LedgerError):
    pass


class UnexpectedItemError(LedgerError):
    pass


class Visibility(Enum):
    REGULAR = "regular"
    EXPERT = "expert"


class TxnPhase(Enum):
    PAYMENT = "Payment"
    SESSION = "Execution"

    @property
    def is_payment(self) -> bool:
        return self is TxnPhase.PAYMENT

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Field:
    name: str
    value: str
    visibility: Visibility = Visibility.REGULAR

    @classmethod
    def regular(cls, name: str, value: str) -> "Field":
        return cls(name, value, Visibility.REGULAR)

    @classmethod
    def expert(cls, name: str, value: str) -> "Field":
        return cls(name, value, Visibility.EXPERT)

    @property
    def is_expert(self) -> bool:
        return self.visibility is Visibility.EXPERT

    def as_expert(self) -> "Field":
        return replace(self, visibility=Visibility.EXPERT)

    def __str__(self):
        return f"{self.name}: {self.value}"
