"""
Dynamic SQL fragments for partial updates and filtered listings.

Both builders are pure: they take a client-supplied mapping and return the
statement text plus the ordered bind values. Only builder-controlled text
(column identifiers, predicate templates) is ever placed in the statement;
every client value goes through an asyncpg placeholder ($1, $2, ...).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class QueryBuildError(ValueError):
    """Client-side problem with the data handed to a query builder."""


class NoDataError(QueryBuildError):
    def __init__(self) -> None:
        super().__init__("No data")


class UnrecognizedFilterKeyError(QueryBuildError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unrecognized filter: {key}")


def quote_identifier(name: str) -> str:
    """
    Double-quote a column identifier, doubling any embedded quotes.
    """
    return '"' + name.replace('"', '""') + '"'


@dataclass(frozen=True)
class PartialUpdate:
    assignments: str
    values: list[Any]

    @property
    def next_index(self) -> int:
        """Placeholder index the caller should use for its lookup key."""
        return len(self.values) + 1


def sql_for_partial_update(data: Mapping[str, Any], translation: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET fragment of an UPDATE from only the fields being changed.

    {"firstName": "Aliya", "age": 32} with {"firstName": "first_name"}
    => '"first_name"=$1, "age"=$2', ["Aliya", 32]
    """
    if not data:
        raise NoDataError()

    clauses: list[str] = []
    values: list[Any] = []
    for key, value in data.items():
        column = translation.get(key, key)
        values.append(value)
        clauses.append(f"{quote_identifier(column)}=${len(values)}")

    return PartialUpdate(assignments=", ".join(clauses), values=values)


@dataclass(frozen=True)
class FilterRule:
    """
    How one filter key renders into a WHERE predicate.

    `template` is trusted SQL. When `binds` is true it must contain a
    `{param}` slot, which receives the next placeholder.
    """

    template: str
    binds: bool = True

    def render(self, param: str | None = None) -> str:
        if not self.binds:
            return self.template
        return self.template.format(param=param)


def contains(column: str) -> FilterRule:
    # case-insensitive, match anywhere
    return FilterRule(f"{column} ILIKE '%' || {{param}} || '%'")


def at_least(column: str) -> FilterRule:
    return FilterRule(f"{column} >= {{param}}")


def at_most(column: str) -> FilterRule:
    return FilterRule(f"{column} <= {{param}}")


def literal(predicate: str) -> FilterRule:
    return FilterRule(predicate, binds=False)


@dataclass(frozen=True)
class FilterVocabulary:
    """
    Everything a resource's search endpoint needs to build its query.

    select: base projection and relation, columns already aliased to their
            external names.
    order_by: natural sort key.
    rules: recognized filter key -> predicate rule.
    """

    select: str
    order_by: str
    rules: Mapping[str, FilterRule] = field(default_factory=dict)


@dataclass(frozen=True)
class FilterQuery:
    statement: str
    values: list[Any]


def check_filter_keys(filters: Mapping[str, Any], vocabulary: FilterVocabulary) -> None:
    for key in filters:
        if key not in vocabulary.rules:
            raise UnrecognizedFilterKeyError(key)


def build_filter_query(filters: Mapping[str, Any] | None, vocabulary: FilterVocabulary) -> FilterQuery:
    """
    Build `SELECT ... [WHERE ...] ORDER BY ...` for the given filters.

    Predicates follow the iteration order of `filters` and are joined with
    AND. Literal rules add no placeholder and no value; a literal rule given
    a falsy value (e.g. hasEquity=false) is skipped.
    """
    filters = filters or {}
    check_filter_keys(filters, vocabulary)

    predicates: list[str] = []
    values: list[Any] = []
    for key, value in filters.items():
        rule = vocabulary.rules[key]
        if not rule.binds:
            if value:
                predicates.append(rule.render())
            continue
        values.append(value)
        predicates.append(rule.render(f"${len(values)}"))

    statement = vocabulary.select
    if predicates:
        statement += "\nWHERE " + "\n  AND ".join(predicates)
    statement += f"\nORDER BY {vocabulary.order_by}"

    logger.debug("filter_query_built predicates=%s values=%s", len(predicates), len(values))
    return FilterQuery(statement=statement, values=values)
