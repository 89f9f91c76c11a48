"""Domain errors raised by the menu API and translated to HTTP responses."""


class MenuItemNotFoundError(Exception):
    """Raised when a referenced menu item id does not exist."""

    def __init__(self, item_id: int | None) -> None:
        self.item_id = item_id
        super().__init__(f"Menu item {item_id} not found")


class MenuValidationError(Exception):
    """Raised when a create or update payload violates one or more rules.

    Carries every violated rule's message, not just the first.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__(f"Validation failed: {'; '.join(messages)}")
