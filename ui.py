import html
import streamlit as st
from catalog import CatalogController
from productstore import SQLProductStore


@st.cache_resource
def get_store() -> SQLProductStore:
    return SQLProductStore()


def get_controller() -> CatalogController:
    """One controller per browser session, loaded from the slot on first use."""
    if "catalog" not in st.session_state:
        controller = CatalogController(get_store())
        controller.initialize()
        st.session_state.catalog = controller
    return st.session_state.catalog


def set_notice(kind: str, message: str):
    st.session_state.notice = (kind, message)


def show_notice():
    notice = st.session_state.pop("notice", None)
    if not notice:
        return
    kind, message = notice
    if kind == "error":
        st.error(message)
    else:
        st.toast(message)


def image_tag(url: str, fallback: str, style: str) -> str:
    # swap to the placeholder if the browser can't load the image
    return (
        f'<img src="{html.escape(url, quote=True)}" style="{style}" '
        f'onerror="this.onerror=null;this.src=\'{fallback}\';">'
    )
