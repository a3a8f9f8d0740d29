import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple
from .categories import CategoryTree
from .config import config
from .delivery import DeliveryCostCalculator
from .domain import Discount, DiscountKind, Product
from .errors import NotFoundError
from .service import ShoppingCart

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    categories: CategoryTree
    products: Tuple[Product, ...]
    cart_items: Tuple[Tuple[str, int], ...]
    campaigns: Tuple[Discount, ...]
    coupon: Optional[Discount]
    delivery: DeliveryCostCalculator


def _lookup(index: Dict[str, object], key: str, what: str):
    if key not in index:
        raise NotFoundError(f"Unknown {what} '{key}' in seed")
    return index[key]


def load_seed(path: str = config.SEED_PATH) -> Catalog:
    """Загружает seed.json: категории, товары, скидки и тарифы доставки"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f, parse_float=Decimal)

    tree = CategoryTree()
    for c in data.get("categories", []):
        parent = c.get("parent")
        tree.create(c["title"], _lookup(tree.by_title(), parent, "category") if parent else None)

    categories = tree.by_title()

    def _to_product(p) -> Product:
        category = _lookup(categories, p["category"], "category")
        return Product(title=p["title"], price=p["price"], category_id=category.id)

    products = tuple(map(_to_product, data.get("products", [])))

    def _to_campaign(c) -> Discount:
        return Discount.campaign(
            _lookup(categories, c["category"], "category"),
            int(c["minimum_amount"]),
            c["discount_amount"],
            DiscountKind(c["kind"]),
        )

    campaigns = tuple(map(_to_campaign, data.get("campaigns", [])))

    coupon_data = data.get("coupon")
    coupon = (
        Discount.coupon(
            int(coupon_data["minimum_amount"]),
            coupon_data["discount_amount"],
            DiscountKind(coupon_data["kind"]),
        )
        if coupon_data
        else None
    )

    rates = data.get("delivery", {})
    delivery = DeliveryCostCalculator(
        cost_per_delivery=rates.get("cost_per_delivery", 0),
        cost_per_product=rates.get("cost_per_product", 0),
        fixed_cost=rates.get("fixed_cost", config.DEFAULT_FIXED_COST),
    )

    cart_items = tuple((str(title), int(qty)) for title, qty in data.get("cart", []))

    logger.info(
        "Seed loaded from %s: %s categories, %s products, %s campaigns",
        path,
        len(tree.categories),
        len(products),
        len(campaigns),
    )
    return Catalog(tree, products, cart_items, campaigns, coupon, delivery)


def build_demo_cart(catalog: Catalog) -> ShoppingCart:
    """Собирает корзину из seed: товары, кампании и купон"""
    cart = ShoppingCart(catalog.delivery, catalog.categories)
    products = {p.title: p for p in catalog.products}

    for title, qty in catalog.cart_items:
        cart.add_product(_lookup(products, title, "product"), qty)

    cart.apply_campaigns(*catalog.campaigns)
    if catalog.coupon is not None:
        cart.apply_coupon(catalog.coupon)
    return cart


def product_by_title(catalog: Catalog, title: str) -> Product:
    return _lookup({p.title: p for p in catalog.products}, title, "product")
