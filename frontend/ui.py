"""
Streamlit frontend for the DevTec catalog.

    streamlit run frontend/ui.py

Loads the entries once (cached for the server process) and keeps one
CatalogController per browser session. Tag chips and the page title are
plain links: ?tag=<tag> runs a search by that tag, ?top=1 scrolls back to
the top. The current search term and sort order are mirrored into the URL
so those links keep the session's state.
"""

import sys
from pathlib import Path
from urllib.parse import urlencode

import streamlit as st
import streamlit.components.v1 as components

# Ensure project root is on sys.path when run with `streamlit run frontend/ui.py`
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog import config
from catalog.controller import CatalogController
from catalog.loader import load
from catalog.models import Entry, SortOrder
from catalog.preferences import PreferenceStore
from catalog.render import to_html
from catalog.theme import ThemeController
from frontend.style import page_css

SORT_LABELS = {
    SortOrder.ALFA_ASC.value:  "Nome (A-Z)",
    SortOrder.ALFA_DESC.value: "Nome (Z-A)",
    SortOrder.ANO_DESC.value:  "Mais recentes",
    SortOrder.ANO_ASC.value:   "Mais antigas",
    SortOrder.POP_DESC.value:  "Mais populares",
    SortOrder.POP_ASC.value:   "Menos populares",
}

SCROLL_TOP_JS = """
<script>
const doc = window.parent.document;
const target = doc.querySelector('[data-testid="stMain"]')
    || doc.querySelector('section.main')
    || window.parent;
target.scrollTo({ top: 0, behavior: "smooth" });
window.parent.scrollTo({ top: 0, behavior: "smooth" });
</script>
"""

st.set_page_config(page_title="DevTec", layout="wide")


@st.cache_resource
def _load_entries() -> list[Entry]:
    return load(config.DATA_SOURCE)


def _sync_params(ctrl: CatalogController) -> None:
    st.query_params["order"] = ctrl.state.sort_order
    if ctrl.state.search_term:
        st.query_params["q"] = ctrl.state.search_term
    elif "q" in st.query_params:
        del st.query_params["q"]


def _controller() -> CatalogController:
    if "controller" not in st.session_state:
        ctrl = CatalogController(_load_entries())
        ctrl.subscribe(lambda _view: _sync_params(ctrl))
        # A fresh session may come from a tag or title link; pick up its state.
        params = st.query_params
        if params.get("order"):
            ctrl.state = ctrl.state.with_sort(params["order"])
        if params.get("q"):
            ctrl.search_field = params["q"]
            ctrl.state = ctrl.state.with_search(params["q"])
        ctrl.refresh()
        st.session_state["controller"] = ctrl
        st.session_state["search_input"] = ctrl.search_field
    return st.session_state["controller"]


def _theme() -> ThemeController:
    if "theme" not in st.session_state:
        theme = ThemeController(PreferenceStore(config.PREFS_FILE))
        theme.restore()
        st.session_state["theme"] = theme
    return st.session_state["theme"]


def _link(ctrl: CatalogController, **extra: str) -> str:
    params = {"order": ctrl.state.sort_order}
    if ctrl.state.search_term:
        params["q"] = ctrl.state.search_term
    params.update(extra)
    return "?" + urlencode(params)


ctrl = _controller()
theme = _theme()

# --- links (tag chip / title click) ---
if "tag" in st.query_params:
    tag = st.query_params["tag"]
    del st.query_params["tag"]
    ctrl.search_by_tag(tag)
    st.session_state["search_input"] = tag

if "top" in st.query_params:
    del st.query_params["top"]
    ctrl.title_clicked()

st.markdown(page_css(theme.marker == "dark"), unsafe_allow_html=True)

# --- header: title + theme toggle ---
head_title, head_toggle = st.columns([10, 1])
with head_title:
    st.markdown(
        f'<h1 class="devtec-title"><a href="{_link(ctrl, top="1")}" target="_self">DevTec</a></h1>',
        unsafe_allow_html=True,
    )
with head_toggle:
    icon = "☀️" if theme.sun_visible else "🌙"
    if st.button(icon, key="theme_toggle", help="Alternar tema claro/escuro"):
        theme.toggle()
        st.rerun()

# --- search: icon button, "Buscar" button, or Enter in the field ---
with st.form("search_form", border=False):
    field_col, icon_col, button_col = st.columns([8, 1, 2])
    with field_col:
        value = st.text_input(
            "Buscar",
            key="search_input",
            placeholder="Busque por nome, descrição ou tag",
            label_visibility="collapsed",
        )
    with icon_col:
        icon_clicked = st.form_submit_button("🔍")
    with button_col:
        button_clicked = st.form_submit_button("Buscar")

if icon_clicked or button_clicked:
    ctrl.submit_search(value)

# --- sort ---

def _on_sort_change() -> None:
    selected = st.session_state["sort_select"]
    if selected is not None:
        _controller().change_sort(selected)


options = list(SORT_LABELS)
current = ctrl.state.sort_order
# An order the select does not know (from the URL) shows as a placeholder,
# so picking any option, A-Z included, is a change.
st.selectbox(
    "Ordenar por",
    options,
    index=options.index(current) if current in options else None,
    format_func=SORT_LABELS.__getitem__,
    placeholder="Ordem original",
    key="sort_select",
    on_change=_on_sort_change,
)

# --- results ---
assert ctrl.view is not None, "Controller not rendered"
st.markdown(
    to_html(ctrl.view, tag_href=lambda t: _link(ctrl, tag=t)),
    unsafe_allow_html=True,
)

if ctrl.consume_scroll_request():
    components.html(SCROLL_TOP_JS, height=0)
