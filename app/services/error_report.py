"""
Error aggregation for sign-up validation.

A ValidationReport maps a field name to the ordered list of messages produced
for it. Messages are merged one at a time so that several validation passes
can report the same problem without the final response repeating it.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple, Union


class ValidationReport:
    """Ordered, de-duplicated mapping of field name -> error messages."""

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def merge(self, field_name: str, message: str) -> "ValidationReport":
        """
        Add `message` under `field_name`.

        - Field absent  → created with a single-element list.
        - Field present → message appended unless already in the list.

        Returns the report itself so calls can be chained.
        """
        messages = self._errors.setdefault(field_name, [])
        if message not in messages:
            messages.append(message)
        return self

    def extend(self, field_name: str, messages: Iterable[str]) -> "ValidationReport":
        for message in messages:
            self.merge(field_name, message)
        return self

    def messages_for(self, field_name: str) -> List[str]:
        return list(self._errors.get(field_name, []))

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for field_name, messages in self._errors.items():
            yield field_name, list(messages)

    def to_dict(self) -> Dict[str, List[str]]:
        """Plain copy suitable for a JSON response body."""
        return {field_name: list(messages) for field_name, messages in self._errors.items()}

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationReport):
            return NotImplemented
        return self._errors == other._errors

    def __repr__(self) -> str:
        return f"ValidationReport({self._errors!r})"


@dataclass(frozen=True)
class Accepted:
    """Every rule passed."""


@dataclass(frozen=True)
class Rejected:
    """At least one rule failed; `report` holds the messages."""

    report: ValidationReport

    def __post_init__(self) -> None:
        if not self.report:
            raise ValueError("A rejected outcome requires at least one error.")


ValidationOutcome = Union[Accepted, Rejected]
