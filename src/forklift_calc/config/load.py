"""Load capacity inputs — machine, load geometry, forks and attachment.

Catalogues here are the only values the form offers: rated capacities per
machine type, standard fork lengths and the attachment presets.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

MachineType = Literal["forklift", "stacker", "ic_forklift"]
Wheelbase = Literal["standard", "short"]
AttachmentType = Literal[
    "none",
    "side_shifter",
    "fork_positioner",
    "rotator",
    "carton_clamp",
    "paper_roll_clamp",
    "push_pull",
    "custom",
]

FORKLIFT_CAPACITIES_KG: tuple[int, ...] = (1500, 2000, 2500, 3000, 3500, 4000, 5000, 7000, 10000)
STACKER_CAPACITIES_KG: tuple[int, ...] = (1500, 2000)
FORK_LENGTHS_MM: tuple[int, ...] = (920, 1070, 1220, 1520, 1820, 2400)

# (weight kg, effective thickness mm) — typical catalogue figures
ATTACHMENT_DEFAULTS: dict[AttachmentType, tuple[float, float]] = {
    "none": (0.0, 0.0),
    "side_shifter": (150.0, 100.0),
    "fork_positioner": (250.0, 120.0),
    "rotator": (400.0, 150.0),
    "carton_clamp": (550.0, 200.0),
    "paper_roll_clamp": (700.0, 250.0),
    "push_pull": (600.0, 200.0),
}


def capacities_for(machine_type: MachineType) -> tuple[int, ...]:
    """Rated capacities offered for a machine type."""
    return STACKER_CAPACITIES_KG if machine_type == "stacker" else FORKLIFT_CAPACITIES_KG


class LoadInputs(BaseModel):
    """One load-capacity check.

    A stacker always runs on the short wheelbase.  Picking a catalogue
    attachment replaces weight and thickness with that attachment's
    defaults; only ``"custom"`` keeps the values as entered.  Passing a
    weight or thickness without a type selects ``"custom"``.
    """

    # --- Machine ---
    machine_type: MachineType = Field(default="forklift", description="Machine class")
    wheelbase: Wheelbase = Field(default="standard", description="Chassis variant (forced short for stackers)")
    rated_capacity_kg: int = Field(default=3000, description="Nameplate capacity at the rated load center (kg)")

    # --- Load ---
    load_weight_kg: float = Field(default=0, description="Weight of the goods (kg)")
    load_length_mm: float = Field(default=0, description="Load depth along the forks (mm)")
    load_width_mm: float = Field(default=0, description="Load width (mm)")
    load_height_mm: float = Field(default=0, description="Load height (mm)")

    # --- Forks & attachment ---
    fork_length_mm: int = Field(default=1070, description="Fork length (mm)")
    attachment_type: AttachmentType = Field(default="none", description="Attachment fitted to the carriage")
    attachment_weight_kg: float = Field(default=0, description="Attachment weight (kg)")
    attachment_effective_thickness_mm: float = Field(
        default=0,
        description="Load-center offset the attachment adds in front of the fork face (mm)",
    )

    @model_validator(mode="before")
    @classmethod
    def _apply_form_rules(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("machine_type") == "stacker":
            data["wheelbase"] = "short"
        # Hand-entered attachment figures without a type mean a custom attachment
        if "attachment_type" not in data and (
            "attachment_weight_kg" in data or "attachment_effective_thickness_mm" in data
        ):
            data["attachment_type"] = "custom"
        attachment = data.get("attachment_type", "none")
        if attachment in ATTACHMENT_DEFAULTS:
            weight, thickness = ATTACHMENT_DEFAULTS[attachment]
            data["attachment_weight_kg"] = weight
            data["attachment_effective_thickness_mm"] = thickness
        return data

    @field_validator("fork_length_mm")
    @classmethod
    def _fork_in_catalogue(cls, v: int) -> int:
        if v not in FORK_LENGTHS_MM:
            raise ValueError(f"fork length {v} mm is not one of {FORK_LENGTHS_MM}")
        return v

    @model_validator(mode="after")
    def _capacity_in_catalogue(self) -> LoadInputs:
        allowed = capacities_for(self.machine_type)
        if self.rated_capacity_kg not in allowed:
            raise ValueError(
                f"rated capacity {self.rated_capacity_kg} kg is not offered for "
                f"machine type '{self.machine_type}' (allowed: {allowed})"
            )
        return self

    # ── Form edits ──────────────────────────────────────────────────────

    def with_machine_type(self, machine_type: MachineType) -> LoadInputs:
        """Switch machine type, falling back to 1500 kg if the capacity is not offered."""
        data = self.model_dump()
        data["machine_type"] = machine_type
        if data["rated_capacity_kg"] not in capacities_for(machine_type):
            data["rated_capacity_kg"] = 1500
        return LoadInputs.model_validate(data)

    def with_attachment(self, attachment_type: AttachmentType) -> LoadInputs:
        """Select an attachment from the catalogue (or ``"custom"``)."""
        return LoadInputs.model_validate({**self.model_dump(), "attachment_type": attachment_type})

    def with_attachment_override(
        self,
        weight_kg: float | None = None,
        thickness_mm: float | None = None,
    ) -> LoadInputs:
        """Hand-edit attachment weight and/or thickness; the type becomes ``"custom"``."""
        data = self.model_dump()
        data["attachment_type"] = "custom"
        if weight_kg is not None:
            data["attachment_weight_kg"] = weight_kg
        if thickness_mm is not None:
            data["attachment_effective_thickness_mm"] = thickness_mm
        return LoadInputs.model_validate(data)
