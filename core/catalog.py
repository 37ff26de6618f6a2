from typing import Iterable, List, Optional
from schemas.schedule.records import Crew, Equipment


class ResourceCatalog:
    """
    Read-only view over the crew and equipment reference lists.

    Lookups return ``None`` for unknown ids; callers fall back to echoing the
    raw id rather than failing.
    """

    def __init__(
        self,
        crews: Optional[Iterable[Crew]] = None,
        equipment: Optional[Iterable[Equipment]] = None,
    ):
        self._crews: List[Crew] = list(crews or [])
        self._equipment: List[Equipment] = list(equipment or [])
        self._crews_by_id = {c.id: c for c in self._crews}
        self._equipment_by_id = {e.id: e for e in self._equipment}

    @property
    def crews(self) -> List[Crew]:
        """Crews in catalog order (the order replacement candidates are scanned)."""
        return list(self._crews)

    @property
    def equipment(self) -> List[Equipment]:
        return list(self._equipment)

    def find_crew(self, crew_id: str) -> Optional[Crew]:
        return self._crews_by_id.get(crew_id)

    def find_equipment(self, equipment_id: str) -> Optional[Equipment]:
        return self._equipment_by_id.get(equipment_id)

    def crew_name(self, crew_id: str) -> str:
        crew = self.find_crew(crew_id)
        return crew.name if crew else crew_id

    def equipment_name(self, equipment_id: str) -> str:
        eq = self.find_equipment(equipment_id)
        return eq.name if eq else equipment_id

    @classmethod
    def from_snapshot(cls, snapshot) -> "ResourceCatalog":
        """Build a catalog from anything exposing ``crews`` and ``equipment`` lists."""
        return cls(snapshot.crews, snapshot.equipment)
