"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. Nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """What a simulated shopper has seen and bought so far."""

    user_id: str | None = None
    catalog: list[dict] = field(default_factory=list)
    cart: dict[str, int] = field(default_factory=dict)
    order_ids: list[str] = field(default_factory=list)
    rejected: int = 0
