# ABOUTME: Get-or-create resolution of author/publisher names into a book's association list.
# ABOUTME: Reuses stored entities by exact name and never adds the same entity twice.

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar


class _Entity(Protocol):
    id: int | None
    name: str


E = TypeVar("E", bound=_Entity)


def resolve_references(
    names: Iterable[str] | None,
    associations: list[E],
    find_by_name: Callable[[str], E | None],
    create: Callable[[str], E],
) -> None:
    """Attach the entities named in ``names`` to ``associations``.

    For each name, in order: look it up by exact name, create and persist it
    if absent, then append it unless an entity with the same id is already
    attached. Repeating a name within one call finds the entity created for
    its first occurrence. Blank names are skipped. Nothing is ever removed.

    MUTATES ``associations`` in place.

    Args:
        names: Author or publisher names; None or empty is a no-op.
        associations: The book's current author or publisher list.
        find_by_name: Store lookup, e.g. CatalogStore.get_author_by_name.
        create: Store insert, e.g. CatalogStore.add_author.
    """
    if not names:
        return

    for raw_name in names:
        name = raw_name.strip()
        if not name:
            continue

        entity = find_by_name(name)
        if entity is None:
            entity = create(name)

        if not any(_same_entity(existing, entity) for existing in associations):
            associations.append(entity)


def _same_entity(left: _Entity, right: _Entity) -> bool:
    if left is right:
        return True
    return left.id is not None and left.id == right.id
