"""Sales gateway - receives the cart snapshot at checkout.

There is no backend; `LoggingSalesGateway` stands in for one by logging the
sale and keeping it in memory. A real gateway implements `SalesGateway` and
raises `SubmissionFailedError` when the sale could not be recorded.
"""
from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from storefront.errors import ERROR_SUBMISSION_FAILED, SubmissionFailedError
from storefront.logging import get_logger
from storefront.services.money import round_money, sum_money

if TYPE_CHECKING:
    from storefront.cart.models import CartLine

logger = get_logger(__name__)


@dataclass(frozen=True)
class Sale:
    """A finalized cart snapshot submitted at checkout."""
    lines: tuple[CartLine, ...]
    total: Decimal
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def from_lines(cls, lines: tuple[CartLine, ...]) -> Sale:
        total = sum_money(line.total_price for line in lines)
        return cls(lines=tuple(lines), total=total)

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or an API payload."""
        return {
            "id": self.id,
            "created_at": self.created_at,
            "items": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "total": str(round_money(self.total)),
        }


class SalesGateway(ABC):
    """Interface for registering a sale with an external system."""

    @abstractmethod
    async def submit(self, sale: Sale) -> None:
        """
        Record the sale.

        Raises:
            SubmissionFailedError: the sale was not recorded
        """


class LoggingSalesGateway(SalesGateway):
    """
    Stub gateway: logs each sale and keeps it in `submitted`.

    Subclasses override `_send` to talk to a real system; whatever `_send`
    raises is reported as `SubmissionFailedError`.
    """

    def __init__(self) -> None:
        self.submitted: list[Sale] = []

    async def submit(self, sale: Sale) -> None:
        logger.info(
            f"Submitting sale {sale.id}: {sale.total_items} item(s), total {round_money(sale.total)}"
        )
        try:
            await self._send(sale)
        except SubmissionFailedError:
            raise
        except Exception as e:
            logger.error(f"Failed to submit sale {sale.id}: {e}", exc_info=True)
            raise SubmissionFailedError(f"{ERROR_SUBMISSION_FAILED}: {e}", raw_error=e) from e

        self.submitted.append(sale)
        logger.debug(f"Sale payload: {sale.to_dict()}")

    async def _send(self, sale: Sale) -> None:
        """Hook for a real backend call. The stub has nothing to send."""
        return None
