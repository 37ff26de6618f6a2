"""
utils package
-------------

Shared helpers for the schedule engine.

Includes the constants loader, logging setup, time arithmetic, snapshot
validation, CSV/Excel loaders and the demo schedule.
"""
