"""Caller-side filters over segment categories and action types.

Each filter is either the universal "all" marker or an explicit, non-empty
allow-list. An empty allow-list is rejected at construction time instead of
silently matching nothing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable

from .errors import InvalidInput
from .models.segment import ActionType, Category


@dataclass(frozen=True)
class _AcceptedSet:
    """Shared behaviour for AcceptedCategories and AcceptedActions.

    ``members`` is None for the "all" marker.
    """

    members: frozenset | None = None

    _member_type: ClassVar[type[Enum]]
    _label: ClassVar[str]
    _noun: ClassVar[str]

    @classmethod
    def all(cls):
        """Return the filter that matches every value."""
        return cls(None)

    @classmethod
    def from_set(cls, *values: Enum | str | Iterable[Enum | str]):
        """Build an explicit allow-list from enum members or wire names.

        Accepts members positionally or a single iterable of them.

        Raises:
            InvalidInput: If no values are given or a wire name is unknown.
        """
        if len(values) == 1 and not isinstance(values[0], (str, Enum)):
            values = tuple(values[0])
        if not values:
            raise InvalidInput(f"Accepted {cls._label} set must not be empty; use all() instead")
        members = frozenset(cls._coerce(value) for value in values)
        return cls(members)

    @classmethod
    def _coerce(cls, value: Enum | str) -> Enum:
        try:
            return cls._member_type(value)
        except ValueError:
            allowed = ", ".join(m.value for m in cls._member_type)
            raise InvalidInput(
                f"Unknown {cls._noun} {value!r}. Allowed: {allowed}"
            ) from None

    @property
    def is_all(self) -> bool:
        return self.members is None

    def __contains__(self, value: object) -> bool:
        if isinstance(value, Enum) and not isinstance(value, self._member_type):
            return False
        try:
            member = self._member_type(value)
        except (ValueError, TypeError):
            return False
        return self.members is None or member in self.members

    def values(self) -> list:
        """Members in declaration order (every member for "all")."""
        return [m for m in self._member_type if m in self]

    def to_query_value(self) -> str:
        """Render as the JSON array string the API takes as a query value.

        "All" lists every member explicitly: the API falls back to a
        narrower default when the parameter is missing.
        """
        return json.dumps([m.value for m in self.values()], separators=(",", ":"))


class AcceptedCategories(_AcceptedSet):
    """The segment categories a caller wants back."""

    _member_type = Category
    _label = "categories"
    _noun = "category"


class AcceptedActions(_AcceptedSet):
    """The action types a caller wants back."""

    _member_type = ActionType
    _label = "actions"
    _noun = "action type"


def accepts(accepted: _AcceptedSet, value: Category | ActionType) -> bool:
    """Return True if *value* passes *accepted*."""
    return value in accepted
