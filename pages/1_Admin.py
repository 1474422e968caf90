import streamlit as st
from baseClass import FormDraft
from catalog import (
    format_price, MSG_ADDED, MSG_UPDATED, MSG_DELETED,
    PLACEHOLDER_PREVIEW, PLACEHOLDER_THUMB,
)
from errors import CatalogError
from ui import get_controller, get_store, set_notice, show_notice, image_tag

NEW_FIELDS = ("new_name", "new_price", "new_image_url")


def _edit_keys(product_id: str):
    return f"edit_name_{product_id}", f"edit_price_{product_id}", f"edit_image_url_{product_id}"


def _draft_from_state(keys) -> FormDraft:
    name, price, image_url = (st.session_state.get(k, "") for k in keys)
    return FormDraft(name=name, price=price, image_url=image_url)


# Callbacks run before the rerun, so they may reset widget values.

def handle_add():
    try:
        get_controller().add(_draft_from_state(NEW_FIELDS))
    except CatalogError as e:
        set_notice("error", str(e))
        return
    for key in NEW_FIELDS:
        st.session_state[key] = ""
    set_notice("success", MSG_ADDED)


def handle_delete(product_id: str):
    try:
        get_controller().remove(product_id)
    except CatalogError as e:
        set_notice("error", str(e))
        return
    if st.session_state.get("editing_id") == product_id:
        st.session_state.editing_id = None
    set_notice("success", MSG_DELETED)


def start_edit(product_id: str):
    try:
        draft = get_controller().begin_edit(product_id)
    except CatalogError as e:
        set_notice("error", str(e))
        return
    name_key, price_key, image_key = _edit_keys(product_id)
    st.session_state[name_key] = draft.name
    st.session_state[price_key] = draft.price
    st.session_state[image_key] = draft.image_url
    st.session_state.editing_id = product_id


def cancel_edit():
    get_controller().cancel_edit()
    st.session_state.editing_id = None


def handle_update(product_id: str):
    try:
        get_controller().update(product_id, _draft_from_state(_edit_keys(product_id)))
    except CatalogError as e:
        set_notice("error", str(e))
        return
    st.session_state.editing_id = None
    set_notice("success", MSG_UPDATED)


def reset_catalog():
    try:
        get_store().clear()
    except CatalogError as e:
        set_notice("error", str(e))
        return
    get_controller().initialize()
    st.session_state.editing_id = None
    set_notice("success", "Catalog cleared")


def render_add_form():
    st.subheader("Add New Product")
    with st.form("add_product"):
        st.text_input("Product Name", key="new_name", placeholder="Enter product name")
        st.text_input("Price ($)", key="new_price", placeholder="0.00")
        st.text_input("Image URL", key="new_image_url", placeholder="https://example.com/image.jpg")
        st.form_submit_button("Add Product", on_click=handle_add, use_container_width=True)

    preview = st.session_state.get("new_image_url")
    if preview:
        st.markdown(
            image_tag(preview, PLACEHOLDER_PREVIEW, "width:100%;height:8rem;object-fit:cover;border-radius:8px;"),
            unsafe_allow_html=True,
        )


def render_product_list():
    controller = get_controller()
    products = controller.products
    editing_id = st.session_state.get("editing_id")

    st.subheader(f"Product List ({len(products)})")
    if not products:
        st.info("No products yet. Add your first product!")
        return

    for product in products:
        with st.container(border=True):
            thumb, body, actions = st.columns([1, 4, 1])
            with thumb:
                st.markdown(
                    image_tag(product.image_url, PLACEHOLDER_THUMB, "width:64px;height:64px;object-fit:cover;border-radius:6px;"),
                    unsafe_allow_html=True,
                )

            if editing_id == product.id:
                name_key, price_key, image_key = _edit_keys(product.id)
                with body:
                    st.text_input("Product name", key=name_key, label_visibility="collapsed")
                    st.text_input("Price", key=price_key, label_visibility="collapsed")
                    st.text_input("Image URL", key=image_key, label_visibility="collapsed")
                with actions:
                    st.button("Save", key=f"save_{product.id}", on_click=handle_update, args=(product.id,))
                    st.button("Cancel", key=f"cancel_{product.id}", on_click=cancel_edit)
            else:
                with body:
                    st.markdown(f"**{product.name}**")
                    st.markdown(f"### {format_price(product.price)}")
                with actions:
                    st.button("Edit", key=f"edit_{product.id}", on_click=start_edit, args=(product.id,))
                    st.button("Delete", key=f"delete_{product.id}", on_click=handle_delete, args=(product.id,))


def admin_page():
    st.set_page_config(page_title="Admin Panel", layout="wide")
    st.session_state.setdefault("editing_id", None)

    st.title("Admin Panel")
    st.caption("Manage your product inventory")
    show_notice()

    with st.sidebar:
        st.title("Actions")
        st.page_link("app.py", label="Back to Shop")
        st.button("Reset Catalog", on_click=reset_catalog)

    left, right = st.columns([2, 3], gap="large")
    with left:
        render_add_form()
    with right:
        render_product_list()


admin_page()
