"""Scenario-wide base list."""

from zw_converter.data.models import BaseRecord, RawBase


def all_bases(raw_bases: list[RawBase]) -> list[BaseRecord]:
    """Location and type of every base, owned or not, sorted by (q, r).

    Ownership is recorded separately, in each faction's own base list.
    """
    res = [
        BaseRecord(q=b.x, r=b.y, base_type=b.base_type.lower()) for b in raw_bases
    ]
    return sorted(res, key=lambda b: (b.q, b.r))
