from collections import Counter
from typing import List, Optional
from core.catalog import ResourceCatalog
from exceptions.custom_errors import DuplicateStageError
from schemas.schedule.records import Stage


def validate_stages(stages: List[Stage]):
    """
    Validate identity constraints across a stage set.

    Stage ids must be unique, and a stage number may appear only once per
    well. Per-record rules (end after start, telemetry status) are enforced
    by the Stage model itself.

    Raises:
        DuplicateStageError: If either uniqueness rule is broken.
    """
    errors = []

    id_counts = Counter(s.id for s in stages)
    dup_ids = sorted(i for i, n in id_counts.items() if n > 1)
    if dup_ids:
        errors.append(f"     • Duplicate stage ids: {', '.join(dup_ids)}\n")

    number_counts = Counter((s.wellId, s.stageNumber) for s in stages)
    dup_numbers = sorted(k for k, n in number_counts.items() if n > 1)
    if dup_numbers:
        errors.append(
            "     • Stage number used more than once on a well: "
            + ", ".join(f"{well} #{num}" for well, num in dup_numbers)
            + "\n"
        )

    if errors:
        errors.insert(0, "⚠️ Schedule contains duplicate stages:\n")
        raise DuplicateStageError("\n".join(errors))


def validate_catalog_references(
    stages: List[Stage], catalog: ResourceCatalog
) -> Optional[str]:
    """
    Check that every crew and equipment id used by a stage exists in the catalog.

    Unknown ids are not an error: the engine carries them forward and shows the
    raw id wherever a name would appear.

    Returns:
        Optional[str]: A note listing the unknown ids, or None if all resolve.
    """
    missing_crews = sorted(
        {s.crewId for s in stages if catalog.find_crew(s.crewId) is None}
    )
    missing_equipment = sorted(
        {
            eq
            for s in stages
            for eq in s.equipmentIds
            if catalog.find_equipment(eq) is None
        }
    )
    if not missing_crews and not missing_equipment:
        return None

    msg = ["Note: some stages reference resources not found in the catalog.\n"]
    if missing_crews:
        msg.append(f"     • Crews: {', '.join(missing_crews)}\n")
    if missing_equipment:
        msg.append(f"     • Equipment: {', '.join(missing_equipment)}\n")
    msg.append("They will be shown by id.\n")
    return "\n".join(msg)
