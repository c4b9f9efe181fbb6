"""GET /v1/payment-methods - Payment methods accepted at checkout"""

from fastapi import APIRouter

from laburar_pricing.api.v1.schemas import PaymentMethodsResponse, to_payment_method_schema
from laburar_pricing.domain.payment_methods import list_payment_methods

router = APIRouter()


@router.get("/payment-methods", response_model=PaymentMethodsResponse)
def get_payment_methods():
    return PaymentMethodsResponse(
        payment_methods=[to_payment_method_schema(method) for method in list_payment_methods()],
    )
