"""Load-center derating, attachment penalty, lift-height table and upgrade search.

Moment balance about the front axle:

  available_moment = rated_capacity × (rated_LC + C)
  gross_capacity   = available_moment / (effective_LC + C)   when effective_LC > rated_LC
  safe_capacity    = floor(max(0, gross_capacity − attachment_weight))

``C`` is the distance from the front axle to the fork face (front overhang).
Loads whose center sits inside the rated load center get no bonus — the
nameplate capacity is a structural cap.
"""

from __future__ import annotations

import logging
import math

from forklift_calc.config.load import FORKLIFT_CAPACITIES_KG, STACKER_CAPACITIES_KG, LoadInputs, Wheelbase
from forklift_calc.models.results import (
    ForkWarning,
    HeightCapacityRow,
    LoadResult,
    Message,
    Recommendation,
)

logger = logging.getLogger(__name__)

# Lift height (mm) → share of ground-level capacity kept at that height
HEIGHT_DERATING: tuple[tuple[int, float], ...] = (
    (3000, 1.00),
    (3500, 0.96),
    (4000, 0.92),
    (4500, 0.88),
    (5000, 0.83),
    (5500, 0.78),
    (6000, 0.72),
)
STACKER_MAX_LIFT_MM = 3500
MIN_FORK_TO_LOAD_RATIO = 0.66


def rated_load_center_mm(rated_capacity_kg: float) -> int:
    """600 mm from 5 t upwards, 500 mm below."""
    return 600 if rated_capacity_kg >= 5000 else 500


def front_overhang_mm(wheelbase: Wheelbase) -> int:
    return 400 if wheelbase == "short" else 480


def net_capacity_kg(
    rated_capacity_kg: float,
    effective_load_center_mm: float,
    overhang_mm: float,
    attachment_weight_kg: float = 0.0,
) -> int:
    """Safe capacity of one machine for one load, after attachment weight."""
    return math.floor(max(0.0, _gross_capacity(
        rated_capacity_kg, effective_load_center_mm, overhang_mm,
    ) - attachment_weight_kg))


def _gross_capacity(rated_capacity_kg: float, effective_load_center_mm: float, overhang_mm: float) -> float:
    rated_lc = rated_load_center_mm(rated_capacity_kg)
    if effective_load_center_mm <= rated_lc:
        return float(rated_capacity_kg)
    available_moment = rated_capacity_kg * (rated_lc + overhang_mm)
    return available_moment / (effective_load_center_mm + overhang_mm)


def compute_load_capacity(inputs: LoadInputs) -> LoadResult:
    """Derate the machine for this load and suggest an upgrade if it falls short."""
    rated_lc = rated_load_center_mm(inputs.rated_capacity_kg)
    overhang = front_overhang_mm(inputs.wheelbase)

    length = inputs.load_length_mm
    load_center = length / 2 if length > 0 else 0.0
    effective_lc = load_center + inputs.attachment_effective_thickness_mm

    gross = _gross_capacity(inputs.rated_capacity_kg, effective_lc, overhang)
    safe_capacity = math.floor(max(0.0, gross - inputs.attachment_weight_kg))
    is_safe = 0 < inputs.load_weight_kg <= safe_capacity

    # ── Fork length ────────────────────────────────────────────────────
    # Push-pull units carry the load on a slip sheet, not on the fork tips.
    fork_warning = None
    min_fork = length * MIN_FORK_TO_LOAD_RATIO
    if length > 0 and inputs.fork_length_mm < min_fork and inputs.attachment_type != "push_pull":
        fork_warning = ForkWarning(
            load_length_mm=length,
            fork_length_mm=inputs.fork_length_mm,
            min_fork_length_mm=math.floor(min_fork),
            message=Message(key="forkWarningText", params={
                "loadLen": length,
                "forkLen": inputs.fork_length_mm,
                "minLen": math.floor(min_fork),
            }),
        )

    # ── Capacity vs. lift height ───────────────────────────────────────
    height_table = []
    for height, factor in HEIGHT_DERATING:
        if inputs.machine_type == "stacker" and height > STACKER_MAX_LIFT_MM:
            continue
        capacity = math.floor(safe_capacity * factor)
        height_table.append(HeightCapacityRow(
            lift_height_mm=height,
            derating_factor=factor,
            capacity_kg=capacity,
            passes=inputs.load_weight_kg <= capacity,
        ))

    recommendation = None if is_safe else find_upgrade(inputs, effective_lc, overhang)

    logger.debug(
        "Load: %s %d kg, LC %.0f/%d mm → safe %d kg (load %.0f kg, safe=%s)",
        inputs.machine_type, inputs.rated_capacity_kg, effective_lc, rated_lc,
        safe_capacity, inputs.load_weight_kg, is_safe,
    )

    return LoadResult(
        safe_capacity_kg=safe_capacity,
        gross_capacity_kg=gross,
        load_center_of_goods_mm=load_center,
        effective_load_center_mm=effective_lc,
        rated_load_center_mm=rated_lc,
        front_overhang_mm=overhang,
        is_safe=is_safe,
        fork_warning=fork_warning,
        height_table=height_table,
        recommendation=recommendation,
    )


def find_upgrade(inputs: LoadInputs, effective_lc: float, overhang: float) -> Recommendation:
    """Smallest machine that can take the load at this load center.

    A stacker first tries the largest stacker.  If that is still too
    small, the forklift catalogue is scanned upwards from the current
    capacity and the first tonnage whose net capacity covers the load wins.
    """
    target = inputs.load_weight_kg
    attachment_weight = inputs.attachment_weight_kg
    messages: list[Message] = []
    stacker_limit = None

    if inputs.machine_type == "stacker":
        largest_stacker = max(STACKER_CAPACITIES_KG)
        stacker_net = net_capacity_kg(largest_stacker, effective_lc, overhang, attachment_weight)
        if target <= stacker_net and largest_stacker > inputs.rated_capacity_kg:
            return Recommendation(
                found=True,
                capacity_kg=largest_stacker,
                machine_class="stacker",
                net_capacity_kg=stacker_net,
                messages=[_upgrade_message(largest_stacker, "stacker", stacker_net)],
            )
        if target > stacker_net:
            stacker_limit = stacker_net
            messages.append(Message(key="recommendationStacker", params={"cap": stacker_net}))

    for capacity in FORKLIFT_CAPACITIES_KG:
        if capacity <= inputs.rated_capacity_kg:
            continue
        net = net_capacity_kg(capacity, effective_lc, overhang, attachment_weight)
        if net >= target:
            messages.append(_upgrade_message(capacity, "forklift", net))
            return Recommendation(
                found=True,
                capacity_kg=capacity,
                machine_class="forklift",
                net_capacity_kg=net,
                stacker_limit_kg=stacker_limit,
                messages=messages,
            )

    messages.append(Message(key="recommendationFail"))
    return Recommendation(found=False, stacker_limit_kg=stacker_limit, messages=messages)


def _upgrade_message(capacity_kg: int, machine_class: str, net_kg: int) -> Message:
    return Message(key="recommendationUpgrade", params={
        "ton": f"{capacity_kg / 1000:.1f}",
        "type": machine_class,
        "cap": net_kg,
    })
