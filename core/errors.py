class ShopError(Exception):
    """Базовая ошибка корзины"""


class ConstructionError(ShopError, ValueError):
    """Скидка (кампания или купон) создана с отрицательными значениями"""


class NotFoundError(ShopError, LookupError):
    """В корзине нет товара с таким названием"""


class InvalidArgumentError(ShopError, ValueError):
    """Неверный аргумент: количество <= 0, пустая корзина и т.п."""
