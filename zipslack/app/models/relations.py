"""Helpers keeping one-to-many edges consistent on both sides.

The owner holds a set of members, each member holds a single back-reference
to its owner. ``back_populates`` mirrors every back-reference change into the
owner's collection, loaded or not, so adding and removing only touch the
member side. Replacing needs the current members and loads the collection.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import object_session


async def replace_members(
    owner: Any, collection: str, back_ref: str, members: Iterable[Any] | None
) -> None:
    new_members = set(members or ())
    current = await getattr(owner.awaitable_attrs, collection)
    for member in list(current):
        if member not in new_members:
            setattr(member, back_ref, None)
    for member in new_members:
        setattr(member, back_ref, owner)
    setattr(owner, collection, new_members)


def add_member(owner: Any, back_ref: str, member: Any) -> None:
    setattr(member, back_ref, owner)
    session = object_session(owner)
    if session is not None:
        session.add(member)


def remove_member(owner: Any, back_ref: str, member: Any) -> None:
    # A member that already moved to another owner keeps that reference
    if getattr(member, back_ref) is owner:
        setattr(member, back_ref, None)
