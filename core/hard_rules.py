from dataclasses import dataclass


@dataclass
class HardRule:
    type: str
    message: str


def define_hard_rules() -> dict[str, HardRule]:
    return {
        "Crew overlap": HardRule(
            "crew-availability",
            "{resource} assigned to overlapping stages on different wells",
        ),
        "Equipment overlap": HardRule(
            "equipment-availability",
            "{resource} scheduled for overlapping operations",
        ),
        "Maintenance window": HardRule(
            "maintenance-window",
            "{resource} has maintenance due that conflicts with scheduled operations",
        ),
        # Add others as needed
    }
