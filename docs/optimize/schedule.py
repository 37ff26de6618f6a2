optimize_schedule_description = """
Run one greedy repair pass over a schedule and report before/after metrics.

### Request Body

- `stages`, `crews`, `equipment`: Same as `/violations/detect`.
- `settings` (Object, Optional):
    - `hourlyRate`: Cost per operating hour in dollars. Defaults to 15000.
    - `utilizationBaseline`: Equipment utilization (%) reported for the original schedule. Defaults to 72.
- `asOf` (datetime, Optional): Reference time for conflict counting.

### Repair Rules

1. For each crew conflict the second stage is reassigned to the first crew that is
   on-site or in transit, has shifts remaining and is free for the stage's window.
   If no crew is free the stage is pushed back 6 hours.
2. For each equipment conflict the second stage is moved to start 30 minutes after
   the first stage ends, keeping its duration.

Repairs are not re-validated within the pass; the remaining conflicts are reported
in `metrics.optimizedMetrics.conflicts`.

### Response

- `optimizedStages`: Repaired copy of the schedule (same stages, same order).
- `changes`: One record per repair (`stageId`, `changeType`, `originalValue`, `newValue`, `reason`).
- `metrics`: `originalMetrics`, `optimizedMetrics`, change summaries and `savings`.
"""
