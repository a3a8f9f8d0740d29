import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from decimal import Decimal
import pytest
from core.categories import CategoryTree, is_descendant_of, root_of, find_category
from core.delivery import DeliveryCostCalculator
from core.domain import Category, Discount, DiscountKind, Product
from core.errors import InvalidArgumentError, NotFoundError
from core.service import ShoppingCart


@pytest.fixture
def tree():
    t = CategoryTree()
    laptop = t.create("Laptop")
    msi = t.create("MSI", laptop)
    t.create("GE63", msi)
    t.create("Smart Phone")
    return t


def test_create_assigns_ids_and_parent(tree):
    """Категории получают уникальные id и ссылку на родителя"""
    laptop, msi, ge63, phone = tree.categories
    assert len({c.id for c in tree.categories}) == 4
    assert laptop.parent_id is None
    assert msi.parent_id == laptop.id
    assert ge63.parent_id == msi.id
    assert phone.parent_id is None


def test_ids_are_unique_across_trees():
    """Разные реестры не выдают одинаковых id"""
    first = CategoryTree()
    second = CategoryTree()
    assert first.create("Smart Phone").id != second.create("Laptop").id


def test_campaign_from_other_tree_does_not_qualify():
    """Кампания на категорию чужого реестра не срабатывает на товары корзины"""
    phones = CategoryTree()
    phone = phones.create("Smart Phone")
    laptop = CategoryTree().create("Laptop")

    cart = ShoppingCart(DeliveryCostCalculator(Decimal("1.5"), Decimal("10")), phones)
    cart.add_product(Product("J7 Pro", Decimal("1599.99"), phone.id), 3)
    cart.apply_campaigns(Discount.campaign(laptop, 1, 50, DiscountKind.FIXED_AMOUNT))

    assert cart.campaign_discount() == 0


def test_create_does_not_reuse_loaded_ids():
    """Новая категория не повторяет id уже загруженных"""
    loaded = CategoryTree((Category(id="c002", title="Laptop"),))
    phone = loaded.create("Smart Phone")
    assert phone.id != "c002"
    assert loaded.get(phone.id).get_or_else(None).title == "Smart Phone"
    assert loaded.title_of("c002") == "Laptop"


def test_duplicate_ids_are_rejected():
    """Реестр с повторяющимися id не создаётся"""
    with pytest.raises(InvalidArgumentError):
        CategoryTree((Category(id="c001", title="A"), Category(id="c001", title="B")))


def test_parent_from_other_tree_is_rejected(tree):
    """Родитель должен быть зарегистрирован в этом же реестре"""
    stranger = CategoryTree().create("Laptop")
    with pytest.raises(NotFoundError):
        tree.create("MSI", stranger)


def test_is_descendant_of_walks_whole_chain(tree):
    """Потомок определяется по всей цепочке родителей"""
    laptop, msi, ge63, phone = tree.categories
    assert tree.is_descendant_of(msi, laptop)
    assert tree.is_descendant_of(ge63, laptop)
    assert not tree.is_descendant_of(laptop, msi)
    assert not tree.is_descendant_of(ge63, phone)


def test_is_descendant_of_is_not_reflexive(tree):
    """Категория не является потомком самой себя"""
    laptop = tree.categories[0]
    assert not tree.is_descendant_of(laptop, laptop)


def test_matches_includes_exact_category(tree):
    """matches: точное совпадение или вложенная категория"""
    laptop, msi, ge63, phone = tree.categories
    assert tree.matches(laptop.id, laptop.id)
    assert tree.matches(ge63.id, laptop.id)
    assert not tree.matches(phone.id, laptop.id)


def test_root_of_returns_outermost_title(tree):
    """root_of возвращает название самого верхнего предка"""
    laptop, msi, ge63, phone = tree.categories
    assert tree.root_of(ge63) == "Laptop"
    assert tree.root_of(msi) == "Laptop"
    assert tree.root_of(phone) == "Smart Phone"


def test_pure_functions_on_plain_tuple():
    """Рекурсивные функции работают на обычном кортеже категорий"""
    cats = (
        Category(id="c001", title="Root", parent_id=None),
        Category(id="c002", title="Sub", parent_id="c001"),
        Category(id="c003", title="Leaf", parent_id="c002"),
    )
    assert is_descendant_of(cats, "c003", "c001")
    assert not is_descendant_of(cats, "c001", "c003")
    assert root_of(cats, "c003").get_or_else(None).title == "Root"
    assert find_category(cats, "cXXX").is_none()
    assert root_of(cats, "cXXX").is_none()


def test_title_of_unknown_id_falls_back_to_id(tree):
    """Неизвестный id возвращается как есть"""
    msi = tree.categories[1]
    assert tree.title_of(msi.id) == "MSI"
    assert tree.title_of("c999") == "c999"
