detect_violations_description = """
Scan a schedule for resource conflicts without changing it.

### Request Body

- `stages` (List): Stage records.
    - `id`: Unique stage id
    - `wellId`: Well the stage belongs to
    - `stageNumber`: Position of the stage on its well
    - `status`: One of `complete`, `in-progress`, `scheduled`, `delayed`
    - `scheduledStart` / `scheduledEnd`: Planned window (ISO 8601, naive values are read as UTC)
    - `crewId`: Assigned crew
    - `equipmentIds`: Assigned equipment units

- `crews` (List, Optional): Crew catalog, used for display names.
- `equipment` (List, Optional): Equipment catalog, required for the maintenance check.
    - `nextMaintenance`: When the unit is next due for maintenance

- `asOf` (datetime, Optional): Reference time for the maintenance check. Defaults to now.
- `includeMaintenance` (bool, Optional): Set to `false` to skip the maintenance check. Defaults to `true`.

### Checks

1. **Crew availability**: a crew assigned to two overlapping stages on different wells.
   Back-to-back stages on the same well are allowed.
2. **Equipment availability**: a unit assigned to two overlapping stages.
3. **Maintenance window**: a unit due for maintenance within 24 hours that is assigned to
   upcoming stages starting before maintenance is due plus 8 hours.

Overlaps are checked between consecutive stages of each resource (ordered by start).

### Response

- `violations`: Crew violations first, then equipment, then maintenance. Each has
  `type`, `description`, `affectedStageIds` and `violation` (always `true`).
- `warnings`: Notes about stages referencing crews or equipment missing from the catalog.
"""
