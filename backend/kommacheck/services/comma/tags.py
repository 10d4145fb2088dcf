from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


PERSON_FEATURES = frozenset({"1", "2", "3"})


class Gender(str, Enum):
    SIN_FEM = "SIN:FEM"
    SIN_MAS = "SIN:MAS"
    SIN_NEU = "SIN:NEU"
    PLU = "PLU"


GenderSet = frozenset[Gender]
NO_GENDER: GenderSet = frozenset()

_SINGULAR_GENDERS = {
    "FEM": Gender.SIN_FEM,
    "MAS": Gender.SIN_MAS,
    "NEU": Gender.SIN_NEU,
}


@dataclass(frozen=True)
class MorphTag:
    """One morphological reading, e.g. ``SUB:NOM:SIN:NEU``.

    ``pos`` is the leading category (``SUB``, ``VER``, ``ART`` ...), ``features``
    the remaining colon-separated segments in their original order.
    """

    pos: str
    features: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> MorphTag:
        head, *rest = raw.strip().split(":")
        return cls(pos=head, features=tuple(rest))

    @property
    def subtype(self) -> str | None:
        return self.features[0] if self.features else None

    @property
    def has_person(self) -> bool:
        # The person digit is never the final segment of a finite verb tag.
        return any(feature in PERSON_FEATURES for feature in self.features[:-1])

    @property
    def genders(self) -> GenderSet:
        found: set[Gender] = set()
        for index, feature in enumerate(self.features):
            if feature.startswith("PLU"):
                found.add(Gender.PLU)
            elif feature == "SIN" and index + 1 < len(self.features):
                following = self.features[index + 1]
                for prefix, gender in _SINGULAR_GENDERS.items():
                    if following.startswith(prefix):
                        found.add(gender)
        return frozenset(found)

    def is_pos(self, *categories: str) -> bool:
        return self.pos in categories

    def is_kind(self, pos: str, *subtypes: str) -> bool:
        return self.pos == pos and self.subtype in subtypes

    def agrees_with(self, genders: GenderSet) -> bool:
        # An empty set places no constraint on the reading.
        if not genders:
            return True
        return bool(self.genders & genders)

    def __str__(self) -> str:
        return ":".join((self.pos, *self.features))


def parse_tags(raw_tags) -> tuple[MorphTag, ...]:
    return tuple(MorphTag.parse(raw) for raw in raw_tags if raw and raw.strip())


def describe_genders(genders: GenderSet) -> str:
    ordered = [gender.value for gender in Gender if gender in genders]
    return "|".join(ordered)
