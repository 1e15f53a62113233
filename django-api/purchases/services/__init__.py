from purchases.services.purchase_service import (
    PURCHASE_RULES,
    PurchaseRule,
    PurchaseService,
    get_purchase_service,
)

__all__ = ["PURCHASE_RULES", "PurchaseRule", "PurchaseService", "get_purchase_service"]
