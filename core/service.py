import logging
from decimal import Decimal
from typing import Optional, Tuple
from Report_Service.report import render_cart
from .categories import CategoryTree
from .domain import Discount, Line, Product
from .errors import InvalidArgumentError
from .pricing import (
    campaign_discount,
    coupon_discount,
    total_after_discounts,
    total_price,
)
from .transforms import (
    add_line,
    distinct_category_count,
    distinct_product_count,
    quantity_of,
    remove_line,
)

logger = logging.getLogger(__name__)


class ShoppingCart:
    """
    Фасад корзины: хранит строки, кампании и купон.
    Все суммы пересчитываются на каждый запрос, ничего не кэшируется.
    Потокобезопасность не гарантируется - одна корзина, один владелец.
    """

    def __init__(self, delivery_cost_calculator, categories: CategoryTree):
        self.delivery_cost_calculator = delivery_cost_calculator
        self.categories = categories
        self._lines: Tuple[Line, ...] = ()
        self._campaigns: Tuple[Discount, ...] = ()
        self._coupon: Optional[Discount] = None

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def campaigns(self) -> Tuple[Discount, ...]:
        return self._campaigns

    @property
    def coupon(self) -> Optional[Discount]:
        return self._coupon

    # ============ Изменение корзины ============

    def add_product(self, product: Optional[Product], qty: int) -> None:
        self._lines = add_line(self._lines, product, qty)
        if product is not None and qty > 0:
            logger.debug("Added %s x %s", product.title, qty)

    def remove_product(self, product: Product, qty: int) -> None:
        """Ищет строку по названию товара; ошибки пробрасываются без изменения корзины"""
        self._lines = remove_line(self._lines, product, qty)
        logger.debug("Removed %s x %s", product.title, qty)

    def apply_campaigns(self, *campaigns: Discount) -> None:
        """Добавляет кампании в конец списка (не заменяет)"""
        if any(not c.is_campaign for c in campaigns):
            raise InvalidArgumentError("Only campaigns can be applied as campaigns")
        self._campaigns = self._campaigns + campaigns
        logger.debug("Applied %s campaign(s), total %s", len(campaigns), len(self._campaigns))

    def apply_coupon(self, coupon: Discount) -> None:
        """Заменяет ранее применённый купон"""
        if coupon is not None and not coupon.is_coupon:
            raise InvalidArgumentError("Campaign can not be applied as coupon")
        self._coupon = coupon
        logger.debug("Applied coupon %s", coupon)

    # ============ Запросы ============

    def total_price(self) -> Decimal:
        return total_price(self._lines)

    def campaign_discount(self) -> Decimal:
        return campaign_discount(self._lines, self._campaigns, self.categories, self.total_price())

    def coupon_discount(self) -> Decimal:
        return coupon_discount(self._coupon, self.total_price())

    def total_price_after_discounts(self) -> Decimal:
        total = self.total_price()
        return total_after_discounts(
            total,
            campaign_discount(self._lines, self._campaigns, self.categories, total),
            coupon_discount(self._coupon, total),
        )

    def total_discount(self) -> Decimal:
        return self.total_price() - self.total_price_after_discounts()

    def delivery_cost(self) -> Decimal:
        return self.delivery_cost_calculator.calculate_for(self)

    def number_of_deliveries(self) -> int:
        return distinct_category_count(self._lines, self.categories)

    def number_of_products(self) -> int:
        return distinct_product_count(self._lines)

    def quantity_of(self, product: Product) -> int:
        return quantity_of(self._lines, product)

    def print(self) -> str:
        """Текстовый отчёт по корзине (вывод - забота вызывающего)"""
        return render_cart(self)
