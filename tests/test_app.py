"""Smoke tests for the Streamlit dashboard."""

from streamlit.testing.v1 import AppTest

APP_PATH = "../streamlit_app.py"


def run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    return at


def test_app_renders_default_prediction():
    at = run_app()

    assert not at.exception
    assert not at.error
    assert len(at.tabs) == 5
    assert at.slider(key="molecular_weight").value == 100000
    assert any("Smooth, uniform, bead-free (optimal)" in info.value for info in at.info)


def test_app_warns_outside_concentration_window():
    at = run_app()
    at.slider(key="molecular_weight").set_value(60000)
    at.slider(key="concentration").set_value(5.0)
    at.run()

    assert not at.exception
    assert any("outside the optimal spinnable window" in w.value for w in at.warning)
    assert any("Beaded fibers" in info.value for info in at.info)
