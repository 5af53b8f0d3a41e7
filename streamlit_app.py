"""Streamlit Web UI for the meta tag optimizer.

Left column: meta title / description inputs with live length feedback and a
search-result preview. Right column: AI suggestions that can be applied back
into the form or copied.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets -> os.environ so the startup check can read it
if "ANTHROPIC_API_KEY" not in os.environ:
    try:
        os.environ["ANTHROPIC_API_KEY"] = st.secrets["ANTHROPIC_API_KEY"]
    except Exception:
        logger.debug("No ANTHROPIC_API_KEY in st.secrets")

from meta_optimizer.app import bootstrap
from meta_optimizer.config import load_config
from meta_optimizer.controller import AppController
from meta_optimizer.errors import ConfigurationError
from meta_optimizer.models.constraints import CONSTRAINTS, FieldKind
from meta_optimizer.models.state import AppState
from meta_optimizer.ui.view_models import (
    PanelMode,
    SuggestionsPanel,
    build_field_view,
    build_panel,
    build_preview,
    optimize_button_label,
)

config = load_config()
logging.basicConfig(
    level=config.ui.log_level.upper(),
    format="%(asctime)s  %(levelname)-7s  %(name)-20s | %(message)s",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Meta Tag SEO Optimizer",
    page_icon=":mag:",
    layout="wide",
)

WIDGET_KEYS = {
    FieldKind.TITLE: "meta_title_input",
    FieldKind.DESCRIPTION: "meta_description_input",
}
FIELD_LABELS = {
    FieldKind.TITLE: "Meta Title",
    FieldKind.DESCRIPTION: "Meta Description",
}

# ---------------------------------------------------------------------------
# Startup: configuration is checked once per session
# ---------------------------------------------------------------------------

if "controller" not in st.session_state:
    try:
        st.session_state.controller = bootstrap(config)
    except ConfigurationError as e:
        logger.error("Startup failed: %s", e)
        st.error(f"Configuration error: {e}")
        st.stop()

controller: AppController = st.session_state.controller

for _kind, _key in WIDGET_KEYS.items():
    if _key not in st.session_state:
        st.session_state[_key] = controller.state.title if _kind is FieldKind.TITLE else controller.state.description


# ---------------------------------------------------------------------------
# Callbacks (run before the script reruns)
# ---------------------------------------------------------------------------


def _on_field_change(kind: FieldKind) -> None:
    controller.set_field(kind, st.session_state[WIDGET_KEYS[kind]])


def _on_apply(kind: FieldKind) -> None:
    controller.apply_result_field(kind)
    state = controller.state
    st.session_state[WIDGET_KEYS[kind]] = state.title if kind is FieldKind.TITLE else state.description


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _render_field(kind: FieldKind) -> None:
    key = WIDGET_KEYS[kind]
    multiline = kind is FieldKind.DESCRIPTION
    widget = st.text_area if multiline else st.text_input
    kwargs = {"height": 120} if multiline else {}
    widget(
        FIELD_LABELS[kind],
        key=key,
        on_change=_on_field_change,
        args=(kind,),
        **kwargs,
    )

    view = build_field_view(FIELD_LABELS[kind], st.session_state[key], CONSTRAINTS[kind], multiline)
    length = f":red[{view.length}]" if view.is_over_limit else str(view.length)
    st.progress(view.ratio)
    st.caption(f":{view.color}[{view.status_label}] | {length} / {view.maximum}")


def _render_preview(state: AppState) -> None:
    preview = build_preview(state.title, state.description, config.ui.preview_url)
    with st.container(border=True):
        st.caption(preview.url)
        st.markdown(f"#### :blue[{preview.title}]")
        st.write(preview.description)


def _render_skeleton() -> None:
    with st.container(border=True):
        with st.status("Optimizing...", state="running"):
            st.caption("Analyzing your meta title and description")
        st.markdown(":gray[░░░░░░░░░░░░░░░░]")
        st.markdown(":gray[░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░]")
        st.markdown(":gray[░░░░░░░░░░░░░░░░░░░░░░░░░░░░]")


def _render_panel(panel: SuggestionsPanel) -> None:
    if panel.mode is PanelMode.SKELETON:
        _render_skeleton()
        return

    if panel.mode is PanelMode.ERROR:
        st.error(panel.message)
        return

    if panel.mode is PanelMode.EMPTY:
        st.info(panel.message, icon=":material/lightbulb:")
        return

    st.markdown("**AI Analysis**")
    st.markdown(f'*"{panel.analysis}"*')
    for card in panel.cards:
        with st.container(border=True):
            st.markdown(f"**{card.heading}**")
            # st.code renders a copy-to-clipboard button
            st.code(card.content, language=None, wrap_lines=True)
            st.button(
                "Apply",
                key=f"apply_{card.target.value}",
                on_click=_on_apply,
                args=(card.target,),
            )


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

st.title("Meta Tag SEO Optimizer")
st.markdown("Craft the perfect meta title & description with real-time feedback and AI power.")

left, right = st.columns(2, gap="large")

with left:
    with st.container(border=True):
        _render_field(FieldKind.TITLE)
        _render_field(FieldKind.DESCRIPTION)

    st.subheader("SERP Preview")
    _render_preview(controller.state)

with right:
    head_col, button_col = st.columns([3, 2])
    with head_col:
        st.subheader("AI Suggestions")
    with button_col:
        button_slot = st.empty()
        clicked = button_slot.button(
            optimize_button_label(controller.request),
            type="primary",
            disabled=not controller.can_optimize,
        )
    panel_slot = st.empty()

    if clicked:

        def _redraw(state: AppState) -> None:
            # Only the in-flight state is drawn here; the rerun below renders the outcome
            if state.request.is_loading:
                button_slot.button(optimize_button_label(state.request), type="primary", disabled=True)
                with panel_slot.container():
                    _render_panel(build_panel(state.request))

        unsubscribe = controller.subscribe(_redraw)
        try:
            asyncio.run(controller.optimize())
        finally:
            unsubscribe()
        st.rerun()

    with panel_slot.container():
        _render_panel(build_panel(controller.request))

st.divider()
st.caption("Built with Streamlit and the Anthropic Claude API.")
