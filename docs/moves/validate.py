validate_move_description = """
Check a proposed drag-and-drop move of one stage against the rest of the schedule.

### Request Body

- `stages`, `crews`, `equipment`: Same as `/violations/detect`.
- `stageId`: Stage being moved. Complete and in-progress stages cannot be moved.
- `newStart`: Proposed start. Snapped to the nearest 30 minutes.
- `newEnd` (Optional): Proposed end. When omitted the stage keeps its duration.

### Response

- `movedStage`: The stage with its proposed window applied.
- `conflicts`: In order, at most one `crew` conflict, one `equipment` conflict per
  overlapping stage that shares equipment, and at most one `overlap` conflict for
  stages on the same well. Every conflict lists the moved stage first in `stageIds`.
"""
