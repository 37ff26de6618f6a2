"""
core
----

Core engine components shared by every schedule operation:

- ResourceCatalog:
  Read-only lookup of crews and equipment by id, injected into the engine
  instead of module-level reference lists.

- HardRule & define_hard_rules:
  Define the violation categories the detector can report and the message
  template used for each.

- ConstraintManager:
  Register and apply detection rules in a controlled sequence.

- DetectionState:
  Encapsulate the stages, catalog, clock and collected violations for one
  detection run.
"""
