"""Custom metrics for the menu API."""

from collections.abc import Iterable
from typing import Protocol

from opentelemetry import metrics
from opentelemetry.metrics import CallbackOptions, Meter, Observation

METER_NAME = "tasty-bites-api"


class SizedMenu(Protocol):
    """Anything exposing the current list of menu items."""

    items: list


class MenuMetrics:
    """Instruments recorded by the menu API.

    Takes its meter from the global provider unless one is passed in, so
    tests can read values through their own reader.
    """

    def __init__(self, meter: Meter | None = None) -> None:
        """Create the instruments.

        Args:
            meter: Meter to create instruments on (defaults to the global one)
        """
        self.meter = meter or metrics.get_meter(METER_NAME)

        # Menu item mutations by operation
        self.menu_mutation_counter = self.meter.create_counter(
            name="menu_item_mutations_total",
            description="Total number of menu item mutations by operation",
            unit="1",
        )

        # Rejected create/update payloads
        self.validation_failure_counter = self.meter.create_counter(
            name="menu_validation_failures_total",
            description="Total number of rejected menu item payloads",
            unit="1",
        )

    def observe_menu_size(self, menu: SizedMenu) -> None:
        """Report the number of items on the menu as an observable gauge.

        The value is read from the store at collection time, so seeded items
        are counted from the start.

        Args:
            menu: Store whose items are counted
        """

        def observe(_options: CallbackOptions) -> Iterable[Observation]:
            yield Observation(len(menu.items))

        self.meter.create_observable_gauge(
            name="menu_item_count",
            callbacks=[observe],
            description="Current number of items on the menu",
            unit="1",
        )

    def record_menu_mutation(self, operation: str) -> None:
        """Record a successful menu mutation.

        Args:
            operation: The mutation performed ("create", "update" or "delete")
        """
        self.menu_mutation_counter.add(1, {"operation": operation})

    def record_validation_failure(self, message_count: int) -> None:
        """Record a rejected create or update payload.

        Args:
            message_count: Number of violated rules in the payload
        """
        self.validation_failure_counter.add(1, {"message_count": message_count})
