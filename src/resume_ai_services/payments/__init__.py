"""Payment authorization and entitlement gating."""

from resume_ai_services.payments.entitlement import require_entitlement
from resume_ai_services.payments.order_issuer import OrderIssuer
from resume_ai_services.payments.payment_verifier import PaymentVerifier
from resume_ai_services.payments.signature import compute_signature, verify_signature

__all__ = [
    "OrderIssuer",
    "PaymentVerifier",
    "compute_signature",
    "require_entitlement",
    "verify_signature",
]
