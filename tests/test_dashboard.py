"""Dashboard behaviour driven through Streamlit's AppTest harness."""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from forklift_calc.config import TcoInputs
from forklift_calc.config.load import ATTACHMENT_DEFAULTS
from forklift_calc.storage import ScenarioStore

APP_PATH = Path(__file__).resolve().parents[1] / "src" / "forklift_calc" / "dashboard" / "app.py"


@pytest.fixture
def scenario_path(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "scenarios.json"
    monkeypatch.setenv("FORKLIFT_CALC_SCENARIO_PATH", str(path))
    return path


@pytest.fixture
def app(scenario_path) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert not at.exception
    return at


def _sidebar_button(at: AppTest, label: str):
    return next(b for b in at.sidebar.button if b.label == label)


class TestScenarios:

    def test_loading_a_scenario_replaces_the_inputs(self, scenario_path: Path):
        ScenarioStore(scenario_path).save("Night shift", TcoInputs(hours_per_day=3, electric_capex=99_000))

        at = AppTest.from_file(str(APP_PATH), default_timeout=60)
        at.run()
        assert at.number_input(key="tco_hours_per_day").value == 8.0

        _sidebar_button(at, "Load").click().run()

        assert not at.exception
        assert at.number_input(key="tco_hours_per_day").value == 3.0
        assert at.number_input(key="tco_electric_capex").value == 99_000.0
        assert at.session_state["tco_inputs"].hours_per_day == 3.0
        assert at.session_state["preset_key"] is None

    def test_loaded_scenario_survives_the_next_rerun(self, scenario_path: Path):
        ScenarioStore(scenario_path).save("Night shift", TcoInputs(hours_per_day=3), preset_key="3t-warehouse")

        at = AppTest.from_file(str(APP_PATH), default_timeout=60)
        at.run()
        _sidebar_button(at, "Load").click().run()
        at.run()

        assert at.session_state["tco_inputs"].hours_per_day == 3.0


class TestAttachmentForm:

    def test_picking_an_attachment_fills_its_figures(self, app: AppTest):
        app.selectbox(key="load_attachment").set_value("rotator").run()
        weight, thickness = ATTACHMENT_DEFAULTS["rotator"]
        assert app.number_input(key="load_att_weight").value == weight
        assert app.number_input(key="load_att_thick").value == thickness

    def test_editing_a_figure_switches_to_custom(self, app: AppTest):
        app.selectbox(key="load_attachment").set_value("side_shifter").run()
        app.number_input(key="load_att_weight").set_value(180.0).run()

        assert app.selectbox(key="load_attachment").value == "custom"
        assert app.number_input(key="load_att_weight").value == 180.0
        assert app.number_input(key="load_att_thick").value == ATTACHMENT_DEFAULTS["side_shifter"][1]

    def test_custom_figures_reach_the_calculation(self, app: AppTest):
        app.number_input(key="load_att_weight").set_value(500.0).run()
        next(b for b in app.button if b.label == "Analyze load").click().run()

        result = app.session_state["load_result"]
        # Nothing else entered: 3000 kg nameplate minus the hand-entered attachment
        assert result.safe_capacity_kg == 2500
