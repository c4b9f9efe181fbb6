"""Payment methods offered at checkout through MercadoPago Argentina"""

from typing import List, Tuple

from laburar_pricing.domain.models import PaymentMethod

PAYMENT_METHODS: Tuple[PaymentMethod, ...] = (
    PaymentMethod(id="credit_card", label="Tarjeta de crédito", supports_installments=True),
    PaymentMethod(id="debit_card", label="Tarjeta de débito"),
    PaymentMethod(id="account_money", label="Dinero en cuenta"),
    PaymentMethod(id="rapipago", label="Rapipago"),
    PaymentMethod(id="pagofacil", label="Pago Fácil"),
    PaymentMethod(id="bank_transfer", label="Transferencia bancaria"),
)


def list_payment_methods() -> List[PaymentMethod]:
    """Payment methods in checkout display order"""
    return list(PAYMENT_METHODS)
