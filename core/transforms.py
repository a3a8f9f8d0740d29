from typing import Optional, Tuple
from .categories import CategoryTree
from .domain import Line, Product
from .errors import InvalidArgumentError, NotFoundError
from .ftypes import Maybe


# ============ Операции над строками корзины (чистые функции) ============
# Добавление ищет товар по ссылке (is), удаление - по названию.


def add_line(lines: Tuple[Line, ...], product: Optional[Product], qty: int) -> Tuple[Line, ...]:
    """Возвращает новые строки с добавленным товаром; пустой товар или qty <= 0 - без изменений"""
    if product is None or qty <= 0:
        return lines

    if any(p is product for p, _ in lines):
        return tuple((p, q + qty) if p is product else (p, q) for p, q in lines)

    return lines + ((product, qty),)


def find_line_by_title(lines: Tuple[Line, ...], title: str) -> Maybe[Line]:
    """Первая строка, у товара которой такое же название"""
    found = next((line for line in lines if line[0].title == title), None)
    return Maybe.some(found) if found is not None else Maybe.nothing()


def remove_line(lines: Tuple[Line, ...], product: Product, qty: int) -> Tuple[Line, ...]:
    """
    Возвращает новые строки после удаления qty единиц товара.
    NotFoundError - нет товара с таким названием
    InvalidArgumentError - qty <= 0
    qty >= количества в строке удаляет строку целиком
    """
    if product is None:
        raise InvalidArgumentError("Product is None")

    found = find_line_by_title(lines, product.title)
    if found.is_none():
        raise NotFoundError(f"There is no {product.title} in products!")

    if qty <= 0:
        raise InvalidArgumentError("Amount must be greater than zero!")

    target, current = found.value
    if qty >= current:
        return tuple(line for line in lines if line[0] is not target)

    return tuple((p, q - qty) if p is target else (p, q) for p, q in lines)


# ============ Агрегаты ============


def quantity_of(lines: Tuple[Line, ...], product: Product) -> int:
    return next((q for p, q in lines if p is product), 0)


def distinct_product_count(lines: Tuple[Line, ...]) -> int:
    """Количество строк (не единиц товара)"""
    return len(lines)


def distinct_category_count(lines: Tuple[Line, ...], tree: CategoryTree) -> int:
    """Количество разных названий категорий = количество доставок"""
    return len({tree.title_of(p.category_id) for p, _ in lines})
