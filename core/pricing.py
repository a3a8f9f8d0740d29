from decimal import Decimal
from functools import reduce
from typing import Optional, Tuple
from .categories import CategoryTree
from .domain import Discount, DiscountKind, Line

ZERO = Decimal("0")
HUNDRED = Decimal("100")


# ============ Сумма корзины ============


def total_price(lines: Tuple[Line, ...]) -> Decimal:
    """Сумма price * qty по всем строкам через reduce"""
    return reduce(lambda acc, line: acc + line[0].price * line[1], lines, ZERO)


def category_quantity(lines: Tuple[Line, ...], tree: CategoryTree, category_id: str) -> int:
    """Количество единиц товаров категории и всех её подкатегорий"""
    return sum(q for p, q in lines if tree.matches(p.category_id, category_id))


# ============ Кампании ============


def campaign_discount(
    lines: Tuple[Line, ...],
    campaigns: Tuple[Discount, ...],
    tree: CategoryTree,
    total: Decimal,
) -> Decimal:
    """
    Скидка по кампаниям - левая свёртка в порядке применения.
    Состояние свёртки - накопленная скидка D.
      FIXED_AMOUNT: D заменяется размером скидки кампании
      PERCENTAGE:   D += (total - D) * rate / 100
    Порядок важен: фиксированная кампания затирает всё накопленное до неё.
    """

    def accumulate(discount: Decimal, campaign: Discount) -> Decimal:
        if category_quantity(lines, tree, campaign.category_id) < campaign.minimum_amount:
            return discount

        if campaign.kind is DiscountKind.FIXED_AMOUNT:
            return campaign.discount_amount

        base = total - discount if discount != 0 else total
        return discount + base * (campaign.discount_amount / HUNDRED)

    return reduce(accumulate, campaigns, ZERO)


# ============ Купон ============


def coupon_discount(coupon: Optional[Discount], total: Decimal) -> Decimal:
    """Скидка по купону от суммы до скидок; не зависит от кампаний"""
    if coupon is None or total < coupon.minimum_amount:
        return ZERO

    if coupon.kind is DiscountKind.FIXED_AMOUNT:
        return coupon.discount_amount
    return total * (coupon.discount_amount / HUNDRED)


def total_after_discounts(total: Decimal, campaign: Decimal, coupon: Decimal) -> Decimal:
    """Обе скидки считаются от исходной суммы и вычитаются один раз"""
    return total - campaign - coupon
