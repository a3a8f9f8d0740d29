import uuid
from typing import Dict, Optional, Tuple
from .domain import Category
from .errors import InvalidArgumentError, NotFoundError
from .ftypes import Maybe


# Рекурсивный обход цепочки родителей


def find_category(cats: Tuple[Category, ...], category_id: Optional[str]) -> Maybe[Category]:
    """Безопасный поиск категории по id"""
    found = next((c for c in cats if c.id == category_id), None)
    return Maybe.some(found) if found is not None else Maybe.nothing()


def is_descendant_of(cats: Tuple[Category, ...], candidate_id: str, ancestor_id: str) -> bool:
    """
    True, если ancestor_id встречается в цепочке родителей candidate_id.
    Строгая проверка: категория не является потомком самой себя.

    Пример:
      Laptop -> MSI -> GE63
      is_descendant_of(cats, GE63, Laptop) -> True
      is_descendant_of(cats, Laptop, Laptop) -> False
    """
    parent_id = find_category(cats, candidate_id).map(lambda c: c.parent_id).get_or_else(None)
    if parent_id is None:
        return False
    if parent_id == ancestor_id:
        return True
    return is_descendant_of(cats, parent_id, ancestor_id)


def root_of(cats: Tuple[Category, ...], category_id: str) -> Maybe[Category]:
    """Самый верхний предок категории (или сама категория, если родителя нет)"""
    category = find_category(cats, category_id)
    if category.is_none():
        return category

    parent_id = category.value.parent_id
    if parent_id is None or find_category(cats, parent_id).is_none():
        return category
    return root_of(cats, parent_id)


class CategoryTree:
    """Реестр категорий. Родитель хранится как id, дети списков потомков не держат"""

    def __init__(self, categories: Tuple[Category, ...] = ()):
        ids = [c.id for c in categories]
        if len(ids) != len(set(ids)):
            raise InvalidArgumentError("Category ids must be unique")
        self.categories = categories

    def create(self, title: str, parent: Optional[Category] = None) -> Category:
        """Регистрирует новую категорию (опционально вложенную в parent); id - uuid"""
        if parent is not None and self.get(parent.id).is_none():
            raise NotFoundError(f"Parent category '{parent.title}' is not in this tree")

        category = Category(
            id=str(uuid.uuid4()),
            title=title,
            parent_id=parent.id if parent is not None else None,
        )
        self.categories = self.categories + (category,)
        return category

    def get(self, category_id: str) -> Maybe[Category]:
        return find_category(self.categories, category_id)

    def by_title(self) -> Dict[str, Category]:
        """Первая категория с каждым названием"""
        result: Dict[str, Category] = {}
        for c in self.categories:
            result.setdefault(c.title, c)
        return result

    def title_of(self, category_id: str) -> str:
        return self.get(category_id).map(lambda c: c.title).get_or_else(category_id)

    def is_descendant_of(self, candidate: Category, ancestor: Category) -> bool:
        return is_descendant_of(self.categories, candidate.id, ancestor.id)

    def root_of(self, category: Category) -> str:
        """Название корневой категории - используется только в отчёте"""
        return self.root_title(category.id)

    def root_title(self, category_id: str) -> str:
        return root_of(self.categories, category_id).map(lambda c: c.title).get_or_else(category_id)

    def matches(self, category_id: str, scope_id: str) -> bool:
        """Категория товара совпадает с категорией кампании или вложена в неё"""
        return category_id == scope_id or is_descendant_of(self.categories, category_id, scope_id)
