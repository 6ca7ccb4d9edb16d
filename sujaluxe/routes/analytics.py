from collections import OrderedDict
from datetime import datetime
from decimal import Decimal

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from sujaluxe.config import settings
from sujaluxe.constants.statuses import CLOSED_ORDER_STATUSES, OrderStatus, UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.auth import ensure_self
from sujaluxe.models.product import Product
from sujaluxe.schemas.user_schemas import AuthUser
from sujaluxe.services import order_service
from sujaluxe.utils.token import get_current_user

router = APIRouter()

TREND_MONTHS = 6
TOP_PRODUCTS = 4


def _month_start(year: int, month: int) -> datetime:
    # month may run outside 1..12 when stepping across a year boundary
    extra_years, month_index = divmod(month - 1, 12)
    return datetime(year + extra_years, month_index + 1, 1)


@router.get("/retailer/{retailer_id}")
def retailer_analytics(
    retailer_id: str,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(get_current_user),
):
    ensure_self(current_user, UserType.retailer, retailer_id)

    rows = order_service.list_orders(session, retailer_id=retailer_id)
    orders = [order for order, _ in rows]
    products = session.exec(select(Product).where(Product.retailer_id == retailer_id)).all()

    now = datetime.utcnow()
    month_start = _month_start(now.year, now.month)

    total_sales = sum((Decimal(o.total_amount) for o in orders), Decimal("0"))
    monthly_revenue = sum(
        (Decimal(o.total_amount) for o in orders if o.order_date >= month_start),
        Decimal("0"),
    )

    active_orders = [o for o in orders if o.order_status not in CLOSED_ORDER_STATUSES]
    pending_shipment = sum(1 for o in active_orders if o.order_status == OrderStatus.confirmed)

    low_stock = [p for p in products if p.stock_quantity < settings.low_stock_threshold]

    # Revenue trend (last 6 months)
    revenue_trend = []
    for i in range(TREND_MONTHS - 1, -1, -1):
        start = _month_start(now.year, now.month - i)
        end = _month_start(now.year, now.month - i + 1)
        revenue = sum(
            (Decimal(o.total_amount) for o in orders if start <= o.order_date < end),
            Decimal("0"),
        )
        revenue_trend.append({"month": start.strftime("%b"), "revenue": round(revenue)})

    # Top selling products (by quantity)
    product_sales = OrderedDict()
    for _, items in rows:
        for item in items:
            entry = product_sales.setdefault(item.product_id, {"name": item.product_name, "sales": 0})
            entry["sales"] += item.quantity

    top_products = sorted(product_sales.values(), key=lambda p: p["sales"], reverse=True)[:TOP_PRODUCTS]

    return {
        "totalSales": round(total_sales),
        "monthlyRevenue": round(monthly_revenue),
        "activeOrders": len(active_orders),
        "pendingShipment": pending_shipment,
        "lowStockCount": len(low_stock),
        "lowStockProducts": [
            {"id": p.id, "name": p.name, "stock": p.stock_quantity} for p in low_stock
        ],
        "revenueTrend": revenue_trend,
        "topProducts": top_products,
    }
