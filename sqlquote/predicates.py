"""Boolean predicate lists rendered as SQL clauses joined with AND."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True)
class PredicateStatement:
    """SQL clause keyword followed by predicates joined with AND."""

    statement: str
    predicates: tuple[Any, ...]

    def __str__(self) -> str:
        return f"{self.statement} {'\nAND '.join(str(p) for p in self.predicates)}"


class Predicates:
    """
    Collection of boolean predicates.

    Predicates are kept as given and converted to text only when the clause is
    rendered, so wrappers like `Column` and `QuotedData` can be mixed with plain
    strings:

        >>> print(Predicates.from_one(f"{Column('a')} = {QuotedData('x')}").and_("b").as_where())
        WHERE "a" = 'x'
        AND b
    """

    def __init__(self):
        self._predicates: list[Any] = []

    @classmethod
    def from_one(cls, predicate: Any) -> Self:
        """Create collection containing given predicate."""
        return cls().and_(predicate)

    @classmethod
    def from_all(cls, predicates: Iterable[Any]) -> Self:
        """Create collection containing given predicates."""
        return cls().and_all(predicates)

    def and_push(self, predicate: Any) -> None:
        self._predicates.append(predicate)

    def and_extend(self, predicates: Iterable[Any]) -> None:
        self._predicates.extend(predicates)

    def and_(self, predicate: Any) -> Self:
        """Append predicate, returning self for chaining."""
        self.and_push(predicate)
        return self

    def and_all(self, predicates: Iterable[Any]) -> Self:
        """Append all predicates, returning self for chaining."""
        self.and_extend(predicates)
        return self

    def as_where(self) -> PredicateStatement:
        return PredicateStatement("WHERE", tuple(self._predicates))

    def __iter__(self) -> Iterator[Any]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)
