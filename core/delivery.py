import logging
from dataclasses import dataclass
from decimal import Decimal
from .config import config
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryCostCalculator:
    """
    Стоимость доставки:
      cost_per_delivery * доставки + cost_per_product * товары + fixed_cost
    Доставка - одна на каждую категорию в корзине.
    Корзина может принимать любой объект с методом calculate_for(cart).
    """

    cost_per_delivery: Decimal
    cost_per_product: Decimal
    fixed_cost: Decimal = config.DEFAULT_FIXED_COST

    def __post_init__(self):
        for name in ("cost_per_delivery", "cost_per_product", "fixed_cost"):
            object.__setattr__(self, name, Decimal(str(getattr(self, name))))

    def calculate_for(self, cart) -> Decimal:
        if cart is None:
            raise InvalidArgumentError("cart is None")

        deliveries = cart.number_of_deliveries()
        products = cart.number_of_products()
        cost = self.cost_per_delivery * deliveries + self.cost_per_product * products + self.fixed_cost

        logger.debug("Delivery cost: %s deliveries, %s products -> %s", deliveries, products, cost)
        return cost
