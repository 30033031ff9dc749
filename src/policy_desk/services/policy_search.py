"""Client-side search over the loaded policies."""

from __future__ import annotations

from collections.abc import Sequence

from policy_desk.models.policy import Policy


def _searchable_fields(policy: Policy) -> list[str]:
    fields = [policy.beneficiary_name, policy.car_brand, policy.car_type]
    if policy.id is not None:
        fields.append(str(policy.id))
    return [value for value in fields if value]


def filter_policies(policies: Sequence[Policy], term: str | None) -> list[Policy]:
    """Return policies whose name, car brand, car type or id contains the term.

    Matching is case-insensitive and keeps the original order. An empty term
    returns every policy.
    """
    if not term:
        return list(policies)
    needle = term.casefold()
    return [
        policy
        for policy in policies
        if any(needle in value.casefold() for value in _searchable_fields(policy))
    ]
