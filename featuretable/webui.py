from __future__ import annotations

from pathlib import Path

import streamlit as st

from featuretable.config import TBL_FILE_SUFFIX, TBL_FORMAT_URL
from featuretable.modules.results_loader import parse_results
from featuretable.modules.tbl_writer import results_to_tbl_string
from featuretable.utils.exceptions import FeatureTableError


st.set_page_config(page_title="Feature table export", page_icon="🧬", layout="wide")

st.title("Feature table export")
st.caption(f"Genome annotations in Genbank 5-column tab-delimited feature table (TBL) format. [Format]({TBL_FORMAT_URL})")


with st.form("tbl_form"):
    uploaded = st.file_uploader("Result records (JSON)", type=["json"])
    file_stem = st.text_input("Output file name", value="annotation")
    submitted = st.form_submit_button("Convert", use_container_width=True)


if not submitted:
    st.info("Upload a results JSON file and press **Convert**.")
    st.stop()


if uploaded is None:
    st.error("Please upload a results JSON file.")
    st.stop()

with st.spinner("Writing feature table..."):
    try:
        results = parse_results(uploaded.getvalue())
        tbl_text = results_to_tbl_string(results)
    except FeatureTableError as exc:
        st.error(f"Conversion failed: {exc}")
        st.exception(exc)
        st.stop()

st.success("Done")

left, right = st.columns(2)
with left:
    st.subheader("Summary")
    st.write(f"Results: `{len(results)}`")
    st.write(f"Genes: `{sum(len(r.annotation.genes) for r in results)}`")
with right:
    st.subheader("Sequences")
    st.write([r.seq_name or r.annotation.seq_id for r in results if not r.annotation.is_empty()])

with st.expander("Preview"):
    st.code(tbl_text or "(empty)", language=None)

st.download_button(
    label="Download feature table",
    data=tbl_text.encode("utf-8"),
    file_name=Path(file_stem.strip() or "annotation").with_suffix(TBL_FILE_SUFFIX).name,
    mime="text/tab-separated-values",
    use_container_width=True,
)
