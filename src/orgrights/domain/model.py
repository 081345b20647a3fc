"""Value objects for rights, org assignments and org rights documents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Right:
    """A permission known to the platform, identified by its reference."""

    ref: str
    name: str


@dataclass(frozen=True, slots=True)
class OrgRightAssignment:
    """A catalog right together with whether one org currently has it."""

    right: Right
    enabled: bool

    @property
    def name(self) -> str:
        return self.right.name

    @property
    def ref(self) -> str:
        return self.right.ref


@dataclass(frozen=True, slots=True)
class OrgRightsDocument:
    """The full set of rights assigned to one org, as fetched from ``href``.

    The document is replaced as a whole on write. Edits produce a new instance.
    """

    href: str
    rights: tuple[Right, ...] = ()

    @property
    def refs(self) -> tuple[str, ...]:
        return tuple(right.ref for right in self.rights)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(right.name for right in self.rights)

    def __contains__(self, ref: object) -> bool:
        return any(right.ref == ref for right in self.rights)
