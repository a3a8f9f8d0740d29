from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from .errors import ConstructionError
from .ftypes import Either


@dataclass(frozen=True)
class Category:
    id: str
    title: str
    parent_id: Optional[str] = None


@dataclass(frozen=True, eq=False)
class Product:
    """Товар. Сравнение по ссылке: два одинаковых товара - две разные строки корзины"""

    title: str
    price: Decimal
    category_id: str

    def __post_init__(self):
        object.__setattr__(self, "price", Decimal(str(self.price)))


class DiscountKind(Enum):
    PERCENTAGE = "rate"
    FIXED_AMOUNT = "amount"


class DiscountScope(Enum):
    CAMPAIGN = "campaign"  # порог - количество товаров категории
    COUPON = "coupon"  # порог - сумма корзины


# (product, qty)
Line = Tuple[Product, int]


def validate_amounts(
    minimum_amount: int, discount_amount: Decimal
) -> Either[str, Tuple[int, Decimal]]:
    """Проверяет, что порог и размер скидки неотрицательны"""

    def check_minimum(values):
        minimum, _ = values
        if minimum < 0:
            return Either.left("Minimum amount must be positive or zero")
        return Either.right(values)

    def check_discount(values):
        _, amount = values
        if amount < 0:
            return Either.left("Discount amount must be positive or zero")
        return Either.right(values)

    return (
        Either.right((minimum_amount, discount_amount))
        .bind(check_minimum)
        .bind(check_discount)
    )


@dataclass(frozen=True)
class Discount:
    """
    Скидка: кампания (на категорию) или купон (на всю корзину).
    Общие поля одинаковы, scope определяет единицу порога:
      CAMPAIGN - количество товаров категории и её подкатегорий
      COUPON   - сумма корзины до скидок
    Ошибки в значениях - ConstructionError сразу при создании.
    """

    scope: DiscountScope
    minimum_amount: int
    discount_amount: Decimal
    kind: DiscountKind
    category_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "discount_amount", Decimal(str(self.discount_amount)))

        checked = validate_amounts(self.minimum_amount, self.discount_amount)
        if checked.is_left:
            raise ConstructionError(checked.value)

        if self.scope is DiscountScope.CAMPAIGN and self.category_id is None:
            raise ConstructionError("Campaign must be bound to a category")
        if self.scope is DiscountScope.COUPON and self.category_id is not None:
            raise ConstructionError("Coupon can not be bound to a category")

    @staticmethod
    def campaign(
        category: Category,
        minimum_amount: int,
        discount_amount: Decimal,
        kind: DiscountKind,
    ) -> "Discount":
        return Discount(
            scope=DiscountScope.CAMPAIGN,
            minimum_amount=minimum_amount,
            discount_amount=discount_amount,
            kind=kind,
            category_id=category.id,
        )

    @staticmethod
    def coupon(
        minimum_amount: int, discount_amount: Decimal, kind: DiscountKind
    ) -> "Discount":
        return Discount(
            scope=DiscountScope.COUPON,
            minimum_amount=minimum_amount,
            discount_amount=discount_amount,
            kind=kind,
        )

    @property
    def is_campaign(self) -> bool:
        return self.scope is DiscountScope.CAMPAIGN

    @property
    def is_coupon(self) -> bool:
        return self.scope is DiscountScope.COUPON
