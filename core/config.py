import os
from dataclasses import dataclass
from decimal import Decimal

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


@dataclass(frozen=True)
class ShopConfig:
    # Отчёт
    CURRENCY: str = "TL"
    CATEGORY_WIDTH: int = 15
    PRICE_WIDTH: int = 18

    # Доставка
    DEFAULT_FIXED_COST: Decimal = Decimal("2.99")

    # Данные
    SEED_PATH: str = os.environ.get(
        "SHOP_SEED_PATH", os.path.join(ROOT_DIR, "data", "seed.json")
    )

    # Логирование (настраивает только хост)
    LOG_LEVEL: str = os.environ.get("SHOP_LOG_LEVEL", "INFO")


config = ShopConfig()
