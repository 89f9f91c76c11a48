"""Unit tests for the in-memory menu repository."""

import pytest

from tasty_bites_api.models.menu_models import MenuCategory, MenuItem, MenuItemPayload
from tasty_bites_api.repositories.menu_repository import MenuRepository, default_menu_items


@pytest.fixture
def payload(valid_payload: dict) -> MenuItemPayload:
    """Create a validated payload for repository calls."""
    return MenuItemPayload(**valid_payload)


@pytest.mark.unit
class TestDefaultMenuItems:
    """Test suite for the seed menu."""

    def test_seed_contains_three_items(self) -> None:
        """Test that the seed menu has ids 1 through 3."""
        items = default_menu_items()

        assert [item.id for item in items] == [1, 2, 3]
        assert items[1].name == "Tiramisu"
        assert items[1].category == MenuCategory.DESSERT

    def test_seed_is_a_fresh_copy(self) -> None:
        """Test that each call returns independent item lists."""
        first = default_menu_items()
        first.pop()

        assert len(default_menu_items()) == 3


@pytest.mark.unit
class TestMenuRepository:
    """Test suite for MenuRepository."""

    def test_repository_initialization(self, menu_repository: MenuRepository) -> None:
        """Test that the counter starts above the highest seeded id."""
        assert len(menu_repository.items) == 3
        assert menu_repository.next_id == 4

    def test_empty_repository_starts_at_one(self, payload: MenuItemPayload) -> None:
        """Test that an empty repository assigns id 1 first."""
        repository = MenuRepository(items=[])

        assert repository.create_item(payload).id == 1

    def test_counter_starts_after_highest_custom_id(self, payload: MenuItemPayload) -> None:
        """Test that custom seed data moves the counter past its highest id."""
        seed = [MenuItem.from_payload(10, payload), MenuItem.from_payload(7, payload)]
        repository = MenuRepository(items=seed)

        assert repository.next_id == 11

    def test_list_items_returns_copy(self, menu_repository: MenuRepository) -> None:
        """Test that callers cannot mutate the stored list through list_items."""
        items = menu_repository.list_items()
        items.clear()

        assert len(menu_repository.list_items()) == 3

    def test_get_item_found(self, menu_repository: MenuRepository) -> None:
        """Test retrieving an existing item."""
        item = menu_repository.get_item(3)

        assert item is not None
        assert item.name == "Iced Tea"

    @pytest.mark.parametrize("item_id", [0, 99, -1, None])
    def test_get_item_missing(self, menu_repository: MenuRepository, item_id: int | None) -> None:
        """Test that unknown ids return None."""
        assert menu_repository.get_item(item_id) is None

    def test_create_item_appends_with_next_id(
        self, menu_repository: MenuRepository, payload: MenuItemPayload
    ) -> None:
        """Test that created items are appended with increasing ids."""
        item = menu_repository.create_item(payload)

        assert item.id == 4
        assert menu_repository.next_id == 5
        assert menu_repository.list_items()[-1] == item
        assert item.name == payload.name

    def test_deleted_ids_are_never_reused(
        self, menu_repository: MenuRepository, payload: MenuItemPayload
    ) -> None:
        """Test that deleting the newest item does not rewind the counter."""
        created = menu_repository.create_item(payload)
        menu_repository.delete_item(created.id)

        assert menu_repository.create_item(payload).id == created.id + 1

    def test_replace_item_keeps_id_and_position(
        self, menu_repository: MenuRepository, payload: MenuItemPayload
    ) -> None:
        """Test that replacing overwrites all fields in place."""
        item = menu_repository.replace_item(2, payload)

        assert item is not None
        assert item.id == 2
        assert item.model_dump(exclude={"id"}) == payload.model_dump()
        assert [i.id for i in menu_repository.list_items()] == [1, 2, 3]
        assert menu_repository.get_item(2) == item

    def test_replace_item_missing(
        self, menu_repository: MenuRepository, payload: MenuItemPayload
    ) -> None:
        """Test that replacing an unknown id returns None and changes nothing."""
        assert menu_repository.replace_item(42, payload) is None
        assert menu_repository.next_id == 4
        assert len(menu_repository.items) == 3

    def test_delete_item(self, menu_repository: MenuRepository) -> None:
        """Test that deleting removes the item and returns it."""
        deleted = menu_repository.delete_item(2)

        assert deleted is not None
        assert deleted.name == "Tiramisu"
        assert [i.id for i in menu_repository.list_items()] == [1, 3]

    def test_delete_item_twice(self, menu_repository: MenuRepository) -> None:
        """Test that a second delete of the same id returns None."""
        menu_repository.delete_item(1)

        assert menu_repository.delete_item(1) is None

    def test_order_after_creates_and_deletes(
        self, menu_repository: MenuRepository, payload: MenuItemPayload
    ) -> None:
        """Test that surviving items keep their relative insertion order."""
        created = [menu_repository.create_item(payload).id for _ in range(3)]
        menu_repository.delete_item(1)
        menu_repository.delete_item(created[1])

        assert [i.id for i in menu_repository.list_items()] == [2, 3, created[0], created[2]]
