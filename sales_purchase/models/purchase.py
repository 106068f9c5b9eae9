from sqlalchemy import Column, Index, Integer

from sales_purchase.database.base import Base


class Purchase(Base):
    __tablename__ = "Purchases"

    id = Column("purchase_id", Integer, primary_key=True, autoincrement=True)
    seller_id = Column(Integer, nullable=False)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_purchases_product", "product_id"),
    )


__all__ = ["Purchase"]
