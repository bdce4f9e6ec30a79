# ui/streamlit_app.py

import os
import json
import requests
import pandas as pd
import streamlit as st

from renobudget.domain.project_types import PLACEHOLDER
from renobudget.domain.tiers import TIER_ORDER
from renobudget.utils.formatting import fmt_months, fmt_pct, fmt_usd

# You can override this when launching:
#   API_BASE=http://localhost:5002 streamlit run ui/streamlit_app.py
API_BASE = os.getenv("API_BASE", "http://localhost:5002")

# --------------------- helpers ---------------------

@st.cache_data(ttl=300)
def load_project_types():
    try:
        data = requests.get(f"{API_BASE}/estimate/project-types", timeout=10).json()
        return data.get("project_types", [])
    except Exception:
        return []

def calculate():
    st.session_state.pop("result", None)
    st.session_state.pop("error", None)
    try:
        resp = requests.post(
            f"{API_BASE}/estimate/calculate",
            json={
                "home_value": st.session_state.home_value,
                "yearly_income": st.session_state.yearly_income,
                "project_type": st.session_state.project_type,
            },
            timeout=30,
        )
        out = resp.json()
        if resp.status_code != 200:
            st.session_state.error = out.get("error", str(out)) if isinstance(out, dict) else str(out)
        else:
            st.session_state.result = out
    except Exception as e:
        st.session_state.error = str(e)

def reset():
    st.session_state.home_value = ""
    st.session_state.yearly_income = ""
    st.session_state.project_type = PLACEHOLDER
    st.session_state.pop("result", None)
    st.session_state.pop("error", None)

# --------------------- UI ---------------------

st.set_page_config(page_title="Renovation Budget Estimator", layout="wide")
st.title("Renovation Budget Estimator")

with st.expander("Connection"):
    st.caption("Backend base URL used by the UI")
    st.code(API_BASE, language="bash")

st.subheader("Your Home")
st.text_input("Current home value ($)", key="home_value", placeholder="300,000")
st.text_input("Yearly income ($)", key="yearly_income", placeholder="90,000")
st.selectbox("Project type", [PLACEHOLDER] + load_project_types(), key="project_type")

# on_click callbacks run before the rerun renders these widgets
cols = st.columns([1, 1, 4])
cols[0].button("Calculate", key="calculate", on_click=calculate)
cols[1].button("Reset", key="reset", on_click=reset, disabled="result" not in st.session_state)

if st.session_state.get("error"):
    st.error(st.session_state.error)

out = st.session_state.get("result")
if out:
    tiers = out["tiers"]
    st.subheader(f"Budget Tiers — {out['inputs']['project_type']}")

    table = pd.DataFrame({
        t.value.capitalize(): {
            "Initial Budget": fmt_usd(tiers[t.value]["initial_budget"]),
            "Contingency Fund": fmt_usd(tiers[t.value]["contingency_fund"]),
            "Total Budget": fmt_usd(tiers[t.value]["total_budget"]),
            "Monthly Savings": fmt_usd(tiers[t.value]["monthly_savings"]),
            "Time to Save": fmt_months(tiers[t.value]["time_to_save"]),
            "ROI": fmt_pct(tiers[t.value]["roi"]),
            "Value Increase": fmt_usd(tiers[t.value]["value_increase"]),
            "Updated Home Value": fmt_usd(tiers[t.value]["updated_home_value"]),
        }
        for t in TIER_ORDER
    })
    st.dataframe(table, use_container_width=True)

    st.download_button(
        "Download JSON Estimate",
        data=json.dumps(out, indent=2),
        file_name="renovation_estimate.json",
        mime="application/json",
    )

    try:
        sresp = requests.post(f"{API_BASE}/estimate/summary", json={"calculation": out}, timeout=30)
        sdata = sresp.json()
        st.subheader("Plan Summary")
        if sresp.status_code == 200 and "markdown" in sdata:
            st.markdown(sdata["markdown"])
        else:
            st.info("Summary unavailable")
    except Exception as e:
        st.warning(f"Summary error: {e}")
