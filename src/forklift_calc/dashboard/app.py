"""Forklift calculator suite — Streamlit dashboard.

Layout: sidebar (currency, language, saved scenarios) → three tabs
(TCO | Load Capacity | Gradeability).  The dashboard only builds input
records, calls the engines and renders their results.

Run with:
    streamlit run src/forklift_calc/dashboard/app.py

Environment:
    FORKLIFT_CALC_SCENARIO_PATH  scenario file (default ~/.forklift_calc/scenarios.json)
    FORKLIFT_CALC_LOG_LEVEL      logging level (default INFO)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st
from pydantic import ValidationError

from forklift_calc.config import (
    CURRENCIES,
    PRESETS,
    REGIONAL_PRICES,
    GradeInputs,
    LoadInputs,
    TcoInputs,
    apply_preset,
    format_currency,
)
from forklift_calc.config.gradeability import SURFACE_FACTORS
from forklift_calc.config.load import ATTACHMENT_DEFAULTS, FORK_LENGTHS_MM, capacities_for
from forklift_calc.config.presets import DEFAULT_PRESET_KEY
from forklift_calc.engine import compute_gradeability, compute_load_capacity, compute_tco
from forklift_calc.engine.tco import TCO_PERIOD_MONTHS, cumulative_costs
from forklift_calc.report import generate_tco_narrative, render_message, translate
from forklift_calc.report.narrative import format_battery_life, format_payback
from forklift_calc.storage import ScenarioStore

logging.basicConfig(
    level=os.environ.get("FORKLIFT_CALC_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_SCENARIO_PATH = Path(
    os.environ.get("FORKLIFT_CALC_SCENARIO_PATH", Path.home() / ".forklift_calc" / "scenarios.json")
)

# ---------------------------------------------------------------------------
# Page config & session state
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Forklift Calculator Suite", page_icon="🚜", layout="wide")

store = ScenarioStore(_SCENARIO_PATH)

if "tco_inputs" not in st.session_state:
    st.session_state.tco_inputs = apply_preset(TcoInputs(), DEFAULT_PRESET_KEY)
    st.session_state.preset_key = DEFAULT_PRESET_KEY
for _key in ("load_result", "grade_result"):
    st.session_state.setdefault(_key, None)
st.session_state.setdefault("load_attachment", "none")
st.session_state.setdefault("load_att_weight", 0.0)
st.session_state.setdefault("load_att_thick", 0.0)


def _on_attachment_picked() -> None:
    picked = st.session_state.load_attachment
    if picked in ATTACHMENT_DEFAULTS:
        st.session_state.load_att_weight, st.session_state.load_att_thick = ATTACHMENT_DEFAULTS[picked]


def _on_attachment_edited() -> None:
    st.session_state.load_attachment = "custom"


# ---------------------------------------------------------------------------
# Sidebar — display settings & saved scenarios
# ---------------------------------------------------------------------------
st.sidebar.title("Settings")
currency = st.sidebar.selectbox("Currency", list(CURRENCIES), index=0)
language = st.sidebar.radio("Language", ["en", "zh"], format_func=lambda x: "EN" if x == "en" else "中文",
                            horizontal=True)

st.sidebar.title("Saved scenarios")
_new_name = st.sidebar.text_input("Scenario name")
if st.sidebar.button("Save current TCO inputs"):
    try:
        store.save(_new_name, st.session_state.tco_inputs, st.session_state.preset_key)
        st.sidebar.success(f"Saved '{_new_name.strip()}'")
    except ValueError as exc:
        st.sidebar.error(str(exc))


def _reset_tco_widgets() -> None:
    """Drop the TCO number inputs so they rebuild from ``tco_inputs``."""
    for k in list(st.session_state):
        if k.startswith("tco_") and k != "tco_inputs":
            del st.session_state[k]


_names = store.names()
if _names:
    _picked = st.sidebar.selectbox("Stored", _names)
    _load_col, _del_col = st.sidebar.columns(2)
    if _load_col.button("Load"):
        _loaded = store.load(_picked)
        if _loaded is not None:
            st.session_state.tco_inputs, st.session_state.preset_key = _loaded
            _reset_tco_widgets()
            st.rerun()
    if _del_col.button("Delete"):
        store.delete(_picked)
        st.rerun()
else:
    st.sidebar.caption("No saved scenarios yet.")


def _money(v: float) -> str:
    return format_currency(v, currency)


def _number(label: str, field: str, step: float = 1.0) -> float:
    current = getattr(st.session_state.tco_inputs, field)
    return st.number_input(label, value=float(current), step=step, key=f"tco_{field}")


st.title("Forklift Calculator Suite")
tco_tab, load_tab, grade_tab = st.tabs(["TCO", "Load Capacity", "Gradeability"])

# ═══════════════════════════════════════════════════════════════════════════
# TCO tab
# ═══════════════════════════════════════════════════════════════════════════
with tco_tab:
    # Scenarios saved without a preset show as "custom" until one is picked
    preset_keys = ["custom", *PRESETS]
    current_preset = st.session_state.preset_key if st.session_state.preset_key in PRESETS else "custom"
    p_col, r_col = st.columns([3, 1])
    chosen = p_col.selectbox("Preset", preset_keys, index=preset_keys.index(current_preset))
    reset = r_col.button("Reset to preset", disabled=chosen == "custom")
    if chosen != "custom" and (chosen != current_preset or reset):
        st.session_state.tco_inputs = apply_preset(st.session_state.tco_inputs, chosen)
        st.session_state.preset_key = chosen
        _reset_tco_widgets()
        st.rerun()

    with st.expander("Inputs", expanded=True):
        c1, c2, c3 = st.columns(3)
        with c1:
            st.subheader("Common")
            values = {
                "number_of_forklifts": _number("Number of forklifts", "number_of_forklifts"),
                "capacity_ton": _number("Capacity (t)", "capacity_ton", 0.1),
                "hours_per_day": _number("Hours per day", "hours_per_day", 0.5),
                "days_per_month": _number("Days per month", "days_per_month"),
                "utilization_pct": _number("Utilization (%)", "utilization_pct"),
            }
            st.subheader("Financing")
            values.update({
                "downpayment_pct": _number("Downpayment (%)", "downpayment_pct"),
                "loan_tenure_months": _number("Loan tenure (months)", "loan_tenure_months"),
                "annual_interest_rate_pct": _number("Interest rate (%/yr)", "annual_interest_rate_pct", 0.1),
                "annual_insurance_per_year": _number("Insurance per unit per year", "annual_insurance_per_year", 100.0),
            })
        with c2:
            st.subheader("Diesel")
            values.update({
                "diesel_capex": _number("Diesel capex", "diesel_capex", 1000.0),
                "fuel_l_per_hour": _number("Fuel use (L/h)", "fuel_l_per_hour", 0.1),
                "diesel_price_per_liter": _number("Diesel price (per L)", "diesel_price_per_liter", 0.01),
                "diesel_maint_per_hour": _number("Maintenance (per h)", "diesel_maint_per_hour", 0.5),
            })
            st.subheader("Battery-electric")
            values.update({
                "electric_capex": _number("Electric capex", "electric_capex", 1000.0),
                "kwh_per_hour": _number("Energy use (kWh/h)", "kwh_per_hour", 0.1),
                "tariff_per_kwh": _number("Tariff (per kWh)", "tariff_per_kwh", 0.01),
                "electric_maint_per_hour": _number("Maintenance (per h)", "electric_maint_per_hour", 0.5),
            })
        with c3:
            st.subheader("Battery pack")
            values.update({
                "battery_voltage": _number("Voltage (V)", "battery_voltage"),
                "battery_ah": _number("Capacity (Ah)", "battery_ah", 10.0),
                "usable_dod_pct": _number("Usable DoD (%)", "usable_dod_pct"),
                "cycles_to_80_pct": _number("Cycles to 80% SOH", "cycles_to_80_pct", 100.0),
                "battery_replacement_cost": _number("Replacement cost", "battery_replacement_cost", 1000.0),
                "grid_co2_intensity_kg_per_kwh": _number("Grid CO2 (kg/kWh)", "grid_co2_intensity_kg_per_kwh", 0.01),
            })

    st.session_state.tco_inputs = TcoInputs(**values)
    res = compute_tco(st.session_state.tco_inputs)

    st.header("Results")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Diesel / month", _money(res.diesel.total_month))
    m2.metric("Electric / month", _money(res.electric.total_month))
    m3.metric("Monthly savings", _money(res.savings.monthly_savings))
    m4.metric("Payback", format_payback(res.savings.payback_period_months))

    cost_rows = pd.DataFrame(
        {
            "Diesel": [res.diesel.energy_cost_month, res.diesel.maint_cost_month, 0.0],
            "Electric": [res.electric.energy_cost_month, res.electric.maint_cost_month,
                         res.electric.amortized_battery_cost_month],
        },
        index=["Energy", "Maintenance", "Battery (amortized)"],
    )
    fig_cost = go.Figure()
    for component, row in cost_rows.iterrows():
        fig_cost.add_trace(go.Bar(name=component, x=cost_rows.columns, y=row.values))
    fig_cost.update_layout(barmode="stack", title="Monthly running cost (fleet)", height=360)

    months = np.arange(0, TCO_PERIOD_MONTHS + 1)
    diesel_cum, electric_cum = cumulative_costs(st.session_state.tco_inputs, res, months)
    fig_cum = go.Figure()
    fig_cum.add_trace(go.Scatter(x=months, y=diesel_cum, name="Diesel", mode="lines"))
    fig_cum.add_trace(go.Scatter(x=months, y=electric_cum, name="Electric", mode="lines"))
    fig_cum.update_layout(title="Cumulative cost", xaxis_title="Month", height=360)

    g1, g2 = st.columns(2)
    g1.plotly_chart(fig_cost, use_container_width=True)
    g2.plotly_chart(fig_cum, use_container_width=True)

    summary = pd.DataFrame(
        [
            ["Total per year", _money(res.diesel.total_year), _money(res.electric.total_year)],
            ["10-year TCO", _money(res.diesel.tco_10_year), _money(res.electric.tco_10_year)],
            ["Fuel / energy per month", f"{res.diesel.fuel_l_month:,.1f} L", f"{res.electric.kwh_month:,.1f} kWh"],
            ["Loan installment / month", _money(res.financing.diesel.monthly_installment),
             _money(res.financing.electric.monthly_installment)],
            ["Insurance / month", _money(res.financing.diesel.monthly_insurance),
             _money(res.financing.electric.monthly_insurance)],
            ["Total financial / month", _money(res.financing.diesel.total_monthly),
             _money(res.financing.electric.total_monthly)],
        ],
        columns=["", "Diesel", "Electric"],
    )
    st.dataframe(summary, use_container_width=True, hide_index=True)

    b1, b2, b3 = st.columns(3)
    b1.metric("Cycles / month / unit", f"{res.electric.cycles_per_month:.1f}")
    b2.metric("Time to 80% SOH", format_battery_life(res.electric.months_to_80))
    b3.metric("Replacements in 10 yrs", res.electric.num_replacements_10_years)

    e1, e2, e3 = st.columns(3)
    e1.metric("Diesel CO2 / month", f"{res.emissions.diesel_co2_kg_month:,.0f} kg")
    e2.metric("Electric CO2 / month", f"{res.emissions.electric_co2_kg_month:,.0f} kg")
    e3.metric("CO2 reduction / month", f"{res.emissions.co2_reduction_kg_month:,.0f} kg")
    st.caption(
        f"Diesel NOx {res.emissions.diesel_nox_g_month:,.0f} g · SOx {res.emissions.diesel_sox_g_month:,.1f} g · "
        f"PM {res.emissions.diesel_pm_g_month:,.0f} g per month. Electric units emit none at point of use."
    )

    with st.expander("Regional reference prices"):
        st.dataframe(pd.DataFrame([p.model_dump() for p in REGIONAL_PRICES]), use_container_width=True,
                     hide_index=True)

    st.download_button(
        "Download report",
        generate_tco_narrative(res, currency),
        file_name="forklift_tco_report.txt",
    )

# ═══════════════════════════════════════════════════════════════════════════
# Load capacity tab
# ═══════════════════════════════════════════════════════════════════════════
with load_tab:
    in_col, out_col = st.columns(2)
    with in_col:
        machine = st.selectbox("Machine type", ["forklift", "ic_forklift", "stacker"],
                               format_func=lambda k: translate(k, language))
        wheelbase = st.selectbox("Wheelbase", ["standard", "short"], disabled=machine == "stacker")
        capacity = st.selectbox("Machine capacity", capacities_for(machine),
                                index=0 if machine == "stacker" else 3,
                                format_func=lambda kg: f"{kg / 1000:.1f} t")
        load_weight = st.number_input("Weight of goods (kg)", value=0.0, step=50.0)
        l1, l2, l3 = st.columns(3)
        length = l1.number_input("Length (mm)", value=0.0, step=50.0)
        width = l2.number_input("Width (mm)", value=0.0, step=50.0)
        height = l3.number_input("Height (mm)", value=0.0, step=50.0)
        fork = st.selectbox("Fork length", FORK_LENGTHS_MM, index=1, format_func=lambda mm: f"{mm} mm")
        attachment = st.selectbox("Attachment", [*ATTACHMENT_DEFAULTS, "custom"], key="load_attachment",
                                  on_change=_on_attachment_picked)
        a1, a2 = st.columns(2)
        # Editing either figure turns the attachment into a custom one
        att_weight = a1.number_input("Attachment weight (kg)", step=10.0, key="load_att_weight",
                                     on_change=_on_attachment_edited)
        att_thick = a2.number_input("Effective thickness (mm)", step=10.0, key="load_att_thick",
                                    on_change=_on_attachment_edited)

        if st.button("Analyze load"):
            try:
                load_inputs = LoadInputs(
                    machine_type=machine, wheelbase=wheelbase, rated_capacity_kg=capacity,
                    load_weight_kg=load_weight, load_length_mm=length, load_width_mm=width,
                    load_height_mm=height, fork_length_mm=fork, attachment_type=attachment,
                    attachment_weight_kg=att_weight, attachment_effective_thickness_mm=att_thick,
                )
                st.session_state.load_result = compute_load_capacity(load_inputs)
            except ValidationError as exc:
                logger.warning("Rejected load inputs: %s", exc)
                st.error(str(exc))

    with out_col:
        lr = st.session_state.load_result
        if lr is None:
            st.info("Enter the load and press Analyze.")
        else:
            verdict = translate("statusSafe" if lr.is_safe else "statusOverload", language)
            (st.success if lr.is_safe else st.error)(verdict)
            k1, k2 = st.columns(2)
            k1.metric("Max safe capacity", f"{lr.safe_capacity_kg} kg")
            k2.metric("Load center", f"{lr.effective_load_center_mm:.0f} mm",
                      help=f"Rated for this machine: {lr.rated_load_center_mm} mm")
            if lr.fork_warning:
                st.warning(render_message(lr.fork_warning.message, language))
            st.dataframe(
                pd.DataFrame([
                    {"Lift height (mm)": r.lift_height_mm, "Capacity (kg)": r.capacity_kg,
                     "Status": "Pass" if r.passes else "Fail"}
                    for r in lr.height_table
                ]),
                use_container_width=True, hide_index=True,
            )
            if lr.recommendation:
                st.info("\n\n".join(render_message(m, language) for m in lr.recommendation.messages))

# ═══════════════════════════════════════════════════════════════════════════
# Gradeability tab
# ═══════════════════════════════════════════════════════════════════════════
with grade_tab:
    in_col, out_col = st.columns(2)
    with in_col:
        r1, r2 = st.columns(2)
        rise = r1.number_input("Ramp rise (mm)", value=0.0, step=50.0)
        run = r2.number_input("Ramp run (mm)", value=0.0, step=100.0)
        g_machine = st.selectbox("Machine", ["stacker", "reach_truck", "three_wheel", "forklift", "ic_forklift"],
                                 index=3, format_func=lambda k: translate(k, language))
        load_state = st.selectbox("Load status", ["loaded", "empty"], format_func=lambda k: translate(k, language))
        surface = st.selectbox("Surface", list(SURFACE_FACTORS), format_func=lambda k: k.replace("_", " "))

        if st.button("Analyze grade"):
            grade = compute_gradeability(GradeInputs(
                machine_type=g_machine, load_state=load_state, surface=surface,
                ramp_rise_mm=rise, ramp_run_mm=run,
            ))
            if grade is not None:
                st.session_state.grade_result = grade

    with out_col:
        gr = st.session_state.grade_result
        if gr is None:
            st.info("Enter the ramp and press Analyze.")
        else:
            banner = {"safe": st.success, "caution": st.warning, "unsafe": st.error}[gr.status]
            banner(translate({"safe": "statusGo", "caution": "statusCaution", "unsafe": "statusStop"}[gr.status],
                             language))
            k1, k2 = st.columns(2)
            k1.metric("Calculated grade", f"{gr.grade_percent}%", help=f"{gr.grade_angle_deg}°")
            k2.metric("Max grade for machine", f"{gr.max_grade_limit}%",
                      help=f"Surface factor {gr.surface_factor * 100:.0f}%")
            for w in gr.warnings:
                st.warning(render_message(w, language))
