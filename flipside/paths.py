DASHBOARD = "/dashboard"
INVOICES = "/dashboard/invoices"
SALES = "/dashboard/sales"
PURCHASES = "/dashboard/purchases"
REFUNDS = "/dashboard/refunds"
LOGIN = "/login"

def labels(order_number: str) -> str:
    return f"{SALES}/{order_number}/labels"
