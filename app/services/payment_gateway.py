"""
Payment gateway port.

Card processing is not performed by this service. `PaymentGateway` is the
interface the payments domain talks to; `MockPaymentGateway` approves every
charge and refund and issues opaque transaction ids, which is what the
marketplace runs with until a real processor is wired in.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ChargeResult:
    success: bool
    transaction_id: Optional[str] = None
    error: Optional[str] = None


class PaymentGateway(ABC):
    """Interface for charging and refunding booking payments"""

    @abstractmethod
    def charge(self, amount: Decimal, currency: str, method: str) -> ChargeResult:
        ...

    @abstractmethod
    def refund(self, transaction_id: Optional[str], amount: Decimal) -> ChargeResult:
        ...


class MockPaymentGateway(PaymentGateway):
    def charge(self, amount: Decimal, currency: str, method: str) -> ChargeResult:
        transaction_id = f"txn_{secrets.token_hex(8)}"
        logger.info(f"💳 Mock charge {amount} {currency} via {method}: {transaction_id}")
        return ChargeResult(success=True, transaction_id=transaction_id)

    def refund(self, transaction_id: Optional[str], amount: Decimal) -> ChargeResult:
        logger.info(f"💳 Mock refund {amount} for {transaction_id}")
        return ChargeResult(success=True, transaction_id=transaction_id)


def get_payment_gateway() -> PaymentGateway:
    """Dependency returning the configured gateway (overridden in tests)"""
    return MockPaymentGateway()
