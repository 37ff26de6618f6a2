"""
scheduler
---------

Schedule conflict engine. Initializes key components:

- `detector`: Violation detection over a stage set.
- `optimizer`: Greedy single-pass repair with before/after metrics.
- `simulator`: What-if impact projection for hypothetical disruptions.
- `moves`: Single-stage move preparation and validation.

Importing the package also configures the engine logger.
"""
from utils import logger as _engine_logger
from . import detector, metrics, moves, optimizer, simulator
