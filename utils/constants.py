import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
LOCKED_STAGE_STATUSES = _constants["LOCKED_STAGE_STATUSES"]

HOURLY_RATE = _constants["HOURLY_RATE"]
UTILIZATION_BASELINE = _constants["UTILIZATION_BASELINE"]
UTILIZATION_CAP = _constants["UTILIZATION_CAP"]
UTILIZATION_STEP_PER_CHANGE = _constants["UTILIZATION_STEP_PER_CHANGE"]
HOURS_SAVED_PER_CHANGE = _constants["HOURS_SAVED_PER_CHANGE"]

CREW_RESCHEDULE_OFFSET_HOURS = _constants["CREW_RESCHEDULE_OFFSET_HOURS"]
EQUIPMENT_STAGGER_BUFFER_MINUTES = _constants["EQUIPMENT_STAGGER_BUFFER_MINUTES"]

MAINTENANCE_LOOKAHEAD_HOURS = _constants["MAINTENANCE_LOOKAHEAD_HOURS"]
MAINTENANCE_WINDOW_HOURS = _constants["MAINTENANCE_WINDOW_HOURS"]

DEFAULT_WELL_DELAY_HOURS = _constants["DEFAULT_WELL_DELAY_HOURS"]
EQUIPMENT_REPLACEMENT_DELAY_HOURS = _constants["EQUIPMENT_REPLACEMENT_DELAY_HOURS"]
WEATHER_DELAY_HOURS_PER_PAD = _constants["WEATHER_DELAY_HOURS_PER_PAD"]
MAJOR_DELAY_THRESHOLD_HOURS = _constants["MAJOR_DELAY_THRESHOLD_HOURS"]
MODERATE_DELAY_THRESHOLD_HOURS = _constants["MODERATE_DELAY_THRESHOLD_HOURS"]

MOVE_SNAP_MINUTES = _constants["MOVE_SNAP_MINUTES"]
