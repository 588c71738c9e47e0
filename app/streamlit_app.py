from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import streamlit as st

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cipherstack.cipher.registry import AlgorithmRegistry
from cipherstack.cipher.validator import validate_request
from cipherstack.config import load_settings
from cipherstack.errors import LayerError
from cipherstack.pipeline import Layer, run_pipeline


st.set_page_config(page_title="Cipher Stack", layout="wide")

settings = load_settings()
registry = AlgorithmRegistry(settings)

st.title("Cipher Stack — Layered Classical Encryption")
st.caption("Education only: chain classical ciphers and S-DES. Layers run top to bottom to encrypt, bottom to top to decrypt.")

if "layer_count" not in st.session_state:
    st.session_state.layer_count = 1

# ---------- Layers ----------
st.subheader("1) Layers")

col_add, col_remove, col_clear = st.columns(3)
with col_add:
    if st.button("Add layer"):
        st.session_state.layer_count += 1
with col_remove:
    if st.button("Remove last layer", disabled=st.session_state.layer_count <= 1):
        st.session_state.layer_count -= 1
with col_clear:
    if st.button("Clear"):
        st.session_state.layer_count = 1
        for k in list(st.session_state.keys()):
            if str(k).startswith(("algo_", "key_")) or k == "plain_text":
                del st.session_state[k]

options = [""] + registry.ids()
names = {a.algorithm_id: a.name for a in registry.list()}

layers: List[Layer] = []
for i in range(st.session_state.layer_count):
    with st.container(border=True):
        st.markdown(f"**Layer {i + 1}**")
        algo_id = st.selectbox(
            "Algorithm",
            options,
            format_func=lambda a: names.get(a, "— select —"),
            key=f"algo_{i}",
        )
        key = ""
        if algo_id:
            key = st.text_input("Key", key=f"key_{i}", help=registry.key_help(algo_id))
            st.caption(registry.key_help(algo_id))
        layers.append(Layer(algorithm=algo_id, key=key))

# ---------- Run ----------
st.subheader("2) Text")

text = st.text_area("Input text", key="plain_text", height=120)
operation = st.selectbox("Operation", ["encrypt", "decrypt"], index=0)

if st.button("Process", type="primary"):
    ok, errs = validate_request(text, layers, registry)
    if not ok:
        for err in errs:
            st.error(err)
    else:
        try:
            out = run_pipeline(text, layers, operation == "encrypt", registry=registry)
        except LayerError as exc:
            st.error(str(exc))
        else:
            st.subheader("Result")
            st.code(out.result, language=None)
            if out.steps:
                with st.expander("S-DES steps", expanded=True):
                    st.text(out.steps)
