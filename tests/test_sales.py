"""
Tests for sales gateway
"""

import pytest
from decimal import Decimal

from storefront.cart import CartLine
from storefront.errors import SubmissionFailedError
from storefront.services.sales import LoggingSalesGateway, Sale


class BrokenGateway(LoggingSalesGateway):
    """Gateway whose backend call blows up"""

    async def _send(self, sale):
        raise ConnectionError("connection refused")


class TestSale:
    """Tests for Sale record."""

    def test_from_lines(self, laptop, mouse):
        """Test total and item count come from the lines."""
        sale = Sale.from_lines((CartLine(laptop, 2), CartLine(mouse, 1)))

        assert sale.total == Decimal("3864.98")
        assert sale.total_items == 3
        assert sale.id
        assert sale.created_at

    def test_ids_are_unique(self, laptop):
        """Test each sale gets its own id."""
        lines = (CartLine(laptop, 1),)

        assert Sale.from_lines(lines).id != Sale.from_lines(lines).id

    def test_to_dict(self, mouse):
        """Test serialization."""
        data = Sale.from_lines((CartLine(mouse, 3),)).to_dict()

        assert data["total"] == "195.00"
        assert data["total_items"] == 3
        assert data["items"][0]["product_name"] == "Mouse Ergonómico"


class TestLoggingSalesGateway:
    """Tests for the stub gateway."""

    @pytest.mark.asyncio
    async def test_records_sale(self, gateway, laptop):
        """Test submitted sales are kept."""
        sale = Sale.from_lines((CartLine(laptop, 1),))

        await gateway.submit(sale)

        assert gateway.submitted == [sale]

    @pytest.mark.asyncio
    async def test_backend_error_wrapped(self, laptop):
        """Test backend exceptions surface as SubmissionFailedError."""
        gw = BrokenGateway()
        sale = Sale.from_lines((CartLine(laptop, 1),))

        with pytest.raises(SubmissionFailedError) as exc_info:
            await gw.submit(sale)

        assert exc_info.value.retryable is True
        assert isinstance(exc_info.value.raw_error, ConnectionError)
        assert gw.submitted == []
