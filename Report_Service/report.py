from typing import Dict, List, Tuple
from functools import reduce
from core.config import config
from core.domain import Line


# ============ Группировка строк ============


def lines_by_category(lines: Tuple[Line, ...]) -> Dict[str, List[Line]]:
    """
    Группирует строки корзины по категории товара
    (порядок категорий - порядок первого появления)
    """

    def add_line(acc: dict, line: Line) -> dict:
        category_id = line[0].category_id
        return {**acc, category_id: acc.get(category_id, []) + [line]}

    return reduce(add_line, lines, {})


# ============ Отчёт по корзине ============


def _money(value) -> str:
    return f"{value} {config.CURRENCY}"


def render_cart(cart) -> str:
    """
    Таблица (корневая категория, товар, количество, цена, сумма)
    и итоговые строки: сумма, сумма со скидками, скидка, доставка
    """
    w = config.CATEGORY_WIDTH
    rows = [
        f"{'Category Name':>{w}} {'Product Name':>{w}} {'Quantity':>{w}} "
        f"{'Unit Price':>{config.PRICE_WIDTH}} {'Total Price':>{config.PRICE_WIDTH}}"
    ]

    for category_id, lines in lines_by_category(cart.lines).items():
        root_title = cart.categories.root_title(category_id)
        for product, qty in lines:
            rows.append(
                f"{root_title:>{w}} {product.title:>{w}} {qty:>{w}} "
                f"{str(product.price):>{w}} {config.CURRENCY} "
                f"{str(product.price * qty):>{w}} {config.CURRENCY}"
            )

    summary = cart_summary(cart)
    rows += [
        "",
        f"Total Price: {_money(summary['total_price'])}",
        f"Total Price After Discounts: {_money(summary['total_after_discounts'])}",
        f"Total Discount: {_money(summary['total_discount'])}",
        f"Delivery Cost: {_money(summary['delivery_cost'])}",
    ]
    return "\n".join(rows) + "\n"


def cart_summary(cart) -> dict:
    """Итоги корзины числами - для хоста (метрики, тесты)"""
    total = cart.total_price()
    after = cart.total_price_after_discounts()

    return {
        "total_price": total,
        "campaign_discount": cart.campaign_discount(),
        "coupon_discount": cart.coupon_discount(),
        "total_after_discounts": after,
        "total_discount": total - after,
        "delivery_cost": cart.delivery_cost(),
        "deliveries": cart.number_of_deliveries(),
        "products": cart.number_of_products(),
    }
