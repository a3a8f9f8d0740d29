import sys
import os
import logging
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.config import config
from core.errors import ShopError
from core.seed import load_seed, build_demo_cart, product_by_title
from Report_Service.report import cart_summary

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# ============ Кэширование данных ============
@st.cache_resource
def get_catalog():
    return load_seed(config.SEED_PATH)


def format_price(value) -> str:
    return f"{value:.2f} {config.CURRENCY}"


# ============ Инициализация ============
st.set_page_config(page_title="Shopping Cart", page_icon="🛒", layout="wide")

catalog = get_catalog()

if "cart" not in st.session_state:
    st.session_state.cart = build_demo_cart(catalog)

cart = st.session_state.cart


# ============ HEADER ============
st.title("🛒 Корзина с кампаниями и купоном")

summary = cart_summary(cart)

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("💰 Сумма", format_price(summary["total_price"]))
with col2:
    st.metric("🏷️ Кампании", format_price(summary["campaign_discount"]))
with col3:
    st.metric("🎟️ Купон", format_price(summary["coupon_discount"]))
with col4:
    st.metric("🚚 Доставка", format_price(summary["delivery_cost"]))

st.divider()
st.code(cart.print(), language="text")


# ============ Удаление товара ============
st.subheader("🗑️ Удалить товар")

col1, col2, col3 = st.columns([4, 2, 2])
with col1:
    title = st.selectbox("Товар", [p.title for p in catalog.products], key="remove_title")
with col2:
    qty = st.number_input("Кол-во", min_value=1, value=3, key="remove_qty")
with col3:
    if st.button("Удалить", key="remove_btn"):
        try:
            cart.remove_product(product_by_title(catalog, title), int(qty))
            st.rerun()
        except ShopError as e:
            logger.warning("Remove failed: %s", e)
            st.error(f"❌ {e}")

if st.button("↩️ Сбросить корзину", key="reset_btn"):
    st.session_state.cart = build_demo_cart(catalog)
    st.rerun()
