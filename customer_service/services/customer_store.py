from __future__ import annotations

import uuid
from threading import Lock

import structlog

from customer_service.models.schemas import Customer, CustomerCreate, Tier

_SEED_CUSTOMERS: tuple[Customer, ...] = (
    Customer(id="1", name="Alice Johnson", email="alice@example.com", tier=Tier.GOLD.value),
    Customer(id="2", name="Bob Smith", email="bob@example.com", tier=Tier.SILVER.value),
    Customer(id="3", name="Charlie Brown", email="charlie@example.com", tier=Tier.BRONZE.value),
)


def _logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(__name__)


class CustomerStore:
    """Thread-safe, process-local customer records (resets on restart).

    Records handed in or out are always copies, so callers never hold a
    reference to the stored model.
    """

    def __init__(self, seed: bool = True) -> None:
        self._lock = Lock()
        self._customers: dict[str, Customer] = {}
        if seed:
            for customer in _SEED_CUSTOMERS:
                self.create(customer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def create(self, customer: CustomerCreate | Customer) -> Customer:
        """Insert or replace the record at the customer's id.

        A missing id is replaced with a freshly generated UUID. An existing
        record with the same id is overwritten wholesale.
        """

        customer_id = customer.id if customer.id is not None else str(uuid.uuid4())
        stored = Customer(id=customer_id, name=customer.name, email=customer.email, tier=customer.tier)

        with self._lock:
            self._customers[customer_id] = stored

        _logger().info(
            "customer_created",
            customer_id=stored.id,
            name=stored.name,
            tier=stored.tier,
        )
        return stored.model_copy()

    def get(self, customer_id: str) -> Customer | None:
        with self._lock:
            customer = self._customers.get(customer_id)

        if customer is None:
            _logger().warning("customer_not_found", customer_id=customer_id)
            return None

        _logger().info("customer_retrieved", customer_id=customer_id, name=customer.name)
        return customer.model_copy()

    def list(self) -> dict[str, Customer]:
        with self._lock:
            snapshot = {customer_id: customer.model_copy() for customer_id, customer in self._customers.items()}

        _logger().info("customers_listed", count=len(snapshot))
        return snapshot

    def delete(self, customer_id: str) -> None:
        with self._lock:
            removed = self._customers.pop(customer_id, None)

        if removed is None:
            _logger().warning("customer_delete_missing", customer_id=customer_id)
        else:
            _logger().info("customer_deleted", customer_id=customer_id, name=removed.name)
