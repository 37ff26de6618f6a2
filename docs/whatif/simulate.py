simulate_scenario_description = """
Estimate the delay and cost of a hypothetical disruption. The schedule is not modified.

### Request Body

- `stages` (List): Stage records.
- `scenario` (Object):
    - `id`, `name`, `description`
    - `changes` (List): Each change has a `type` and `params`:
        - `delay-well`: `wellId`, `hours` (default 24). Every scheduled stage on the well is delayed.
        - `remove-equipment`: `equipmentId`. Every scheduled stage using it loses 4 hours.
        - `weather-event`: `pads` (list), `hours` (default 8). Adds the delay once per pad.
        - `add-crew`: Accepted, adds no delay.

    Malformed params (e.g. `hours` sent as a string, `pads` as a single string) are rejected with 422.
- `settings` (Object, Optional): `hourlyRate` used for the cost impact.

### Response

- `impactedStages`: Scheduled stages hit by the scenario, each listed once.
- `delayHours`: Total projected delay, rounded to whole hours.
- `costImpact`: `delayHours` times the hourly rate.
- `recommendation`: Advisory message based on the size of the delay.
"""
