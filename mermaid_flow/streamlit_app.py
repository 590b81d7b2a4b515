"""Streamlit page for previewing flowcharts generated from a description."""

from __future__ import annotations

import streamlit as st

from mermaid_flow.flowchart import (
    analyze_flowchart_description,
    generate_flowchart,
    normalize_quotes,
)

st.set_page_config(page_title="Mermaid Flowchart Builder", page_icon="🧭", layout="centered")
st.title("🧭 Flowchart Builder")
st.write(
    "Describe a process one step per sentence. Use words like 'then' between steps,"
    " 'if' or 'check' for decisions and 'otherwise' for the alternative branch."
)

description = st.text_area(
    "Process description",
    height=160,
    placeholder="Start the request. Then check the budget. If approved order parts. Otherwise reject.",
)

if description.strip():
    analysis = analyze_flowchart_description(description)

    st.subheader("Analysis")
    st.text(analysis.preview)
    if analysis.is_complete:
        st.success("Your flowchart description appears to be complete.")
    else:
        st.warning("Your flowchart description might be missing some information:")
        for info in analysis.missing_info:
            st.markdown(f"- {info}")

    st.subheader("Mermaid code")
    st.code(generate_flowchart(description), language="mermaid")

    with st.expander("Quote-normalized description"):
        normalized = normalize_quotes(description)
        st.code(normalized.converted_description)
        st.caption(f"Quote characters removed: {normalized.replacement_count}")
else:
    st.info("Enter a description above to see the analysis and the generated flowchart.")
