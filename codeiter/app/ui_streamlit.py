# -*- coding: utf-8 -*-
"""
Run on a free port, e.g.:
  python -m streamlit run codeiter/app/ui_streamlit.py --server.port 8503
"""

from __future__ import annotations
import streamlit as st
from codeiter.app.controller import AppController
from codeiter.orchestration.iteration_types import IterationError
from codeiter.utils.logging import SimpleLogger


def _run(action: str) -> None:
    """Run iterate/retry on the controller and record the outcome in session state."""
    ctrl: AppController = st.session_state.controller
    code = st.session_state.get("code_text", "")
    prompt = st.session_state.get("prompt_text", "")

    if action == "retry":
        if not code or not prompt:
            return
        st.toast("Retrying: sending your request again with a format reminder")
    else:
        if not code.strip():
            st.toast("Missing code: please paste your code before submitting", icon="⚠️")
            return
        if not prompt.strip():
            st.toast("Missing prompt: please describe the changes you want to make", icon="⚠️")
            return

    st.session_state["error_text"] = None
    try:
        with st.spinner("Processing..."):
            if action == "retry":
                ctrl.retry(code, prompt)
            else:
                ctrl.iterate(code, prompt)
    except IterationError as exc:
        st.session_state["error_text"] = str(exc)
        st.toast(f"Error: {exc}", icon="❌")
    except Exception as exc:
        SimpleLogger.error(f"ui_streamlit: unexpected error: {exc!r}")
        st.session_state["error_text"] = "An unexpected error occurred"
        st.toast("Error: An unexpected error occurred", icon="❌")


def main() -> None:
    st.set_page_config(page_title="AI Code Iterator", layout="wide")

    st.markdown(
        """
        <style>
            header {visibility: hidden;}
            div[data-testid="stHeader"] {display: none;}
            div[data-testid="stToolbar"] {display: none;}

            .block-container {
                padding-top: 0.2rem;
                padding-left: 0.6rem;
                padding-right: 0.6rem;
            }

            .field-title {
                font-size: 1.4rem;
                font-weight: 800;
                line-height: 1.2;
                margin-bottom: 0.35rem;
            }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("AI Code Iterator")
    st.caption("Paste your code, describe the changes, and let AI suggest improvements")

    # one controller per user session
    if "controller" not in st.session_state:
        st.session_state.controller = AppController()
    if "error_text" not in st.session_state:
        st.session_state["error_text"] = None

    ctrl: AppController = st.session_state.controller
    if not ctrl.is_configured:
        st.warning("OpenAI API key is not configured. Requests will fail until OPENAI_API_KEY is set.")

    # INPUT: code + change request
    st.markdown('<div class="field-title">Your Code</div>', unsafe_allow_html=True)
    st.text_area(
        label="Code (hidden)",
        key="code_text",
        height=240,
        placeholder="Paste your code here...",
        label_visibility="collapsed",
    )
    st.markdown('<div class="field-title">Change Request</div>', unsafe_allow_html=True)
    st.text_area(
        label="Prompt (hidden)",
        key="prompt_text",
        height=100,
        placeholder="Describe the changes you want to make...",
        label_visibility="collapsed",
    )
    if st.button("Submit", key="btn_submit", type="primary", use_container_width=True):
        _run("iterate")

    error_text = st.session_state.get("error_text")
    if error_text:
        st.error(error_text)
        if st.button("Retry with Different Parameters", key="btn_retry_error", use_container_width=True):
            _run("retry")
            st.rerun()

    # RESULT: suggested code / explanation tabs
    result = ctrl.last_result
    if result is not None:
        st.markdown('<div class="field-title">AI Suggestions</div>', unsafe_allow_html=True)
        tab_code, tab_expl = st.tabs(["Modified Code", "Explanation"])
        with tab_code:
            st.code(result.modified_code)
        with tab_expl:
            st.markdown(result.explanation)

        c1, c2 = st.columns(2, gap="small")
        with c1:
            if st.button("Integrate Changes", key="btn_integrate", use_container_width=True):
                ctrl.integrate()
                st.toast("Code integrated: the suggested code is now your final output")
        with c2:
            if st.button("Try Again", key="btn_retry", use_container_width=True):
                _run("retry")
                st.rerun()

    # FINAL OUTPUT: integrated code (st.code offers a copy button)
    if ctrl.final_code:
        st.markdown('<div class="field-title">Final Output</div>', unsafe_allow_html=True)
        st.code(ctrl.final_code)


if __name__ == "__main__":
    main()
