import streamlit as st
import pandas as pd
from catalog import search_products, format_price, PLACEHOLDER_PREVIEW
from ui import get_store, image_tag


def storefront():
    st.set_page_config(page_title="MyShop", layout="wide")

    st.title("MyShop")
    st.caption("Manage the catalog from the Admin page in the sidebar.")

    # always read the slot, the admin page may have changed it
    products = get_store().load()

    query = st.text_input("Search products", placeholder="e.g. mug")
    products = search_products(products, query)

    if not products:
        st.warning("No products found in the catalog.")
        return

    if st.toggle("Table view"):
        df = pd.DataFrame([p.to_dict() for p in products])
        df["price"] = df["price"].map(format_price)
        st.dataframe(df[["name", "price", "imageUrl"]], use_container_width=True, hide_index=True)
        return

    for product in products:
        with st.container():
            col1, col2 = st.columns([1, 3])

            # LEFT: Product Image
            with col1:
                st.markdown(
                    image_tag(product.image_url, PLACEHOLDER_PREVIEW, "width:180px;border-radius:8px;"),
                    unsafe_allow_html=True,
                )

            # RIGHT: Product Details
            with col2:
                st.subheader(product.name)
                st.write(f"**Price:** {format_price(product.price)}")

            st.markdown("---")


if __name__ == "__main__":
    storefront()
