from purchases.handlers.views import PurchaseQuoteView, PurchaseView

__all__ = ["PurchaseView", "PurchaseQuoteView"]
