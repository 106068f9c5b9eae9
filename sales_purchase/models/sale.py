from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, Numeric

from sales_purchase.database.base import Base


class Sale(Base):
    __tablename__ = "Sales"

    id = Column("sale_id", Integer, primary_key=True, autoincrement=True)

    # owned by the Product and User services, resolved over HTTP
    product_id = Column(Integer, nullable=False)
    user_id = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    cgst = Column(Numeric(10, 2), nullable=False)
    sgst = Column(Numeric(10, 2), nullable=False)
    igst = Column(Numeric(10, 2), nullable=False)
    net_amount = Column(Numeric(10, 2), nullable=False)
    gross_amount = Column(Numeric(10, 2), nullable=False)

    sale_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_sales_user", "user_id"),
        Index("idx_sales_product", "product_id"),
    )


__all__ = ["Sale"]
