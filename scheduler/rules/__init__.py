"""
scheduler.rules
---------------

Exposes all detection rules by importing from:

- `crew`: Crew double-booking across different wells.
- `equipment`: Equipment double-booking across different wells.
- `maintenance`: Stages that fall inside an imminent maintenance window.

Each rule takes a `DetectionState` and appends to `state.violations`.
"""
from .crew import *
from .equipment import *
from .maintenance import *
