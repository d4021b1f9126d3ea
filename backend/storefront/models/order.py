"""
Modelos de almacenamiento local para órdenes y notas
"""
from sqlalchemy import (
    Boolean, Column, DateTime, DECIMAL, ForeignKey, Integer, JSON, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from storefront.core.database import Base


class Order(Base):
    """
    Cached copy of a remote order, keyed by (site_id, order_id)
    """
    __tablename__ = "orders"
    __table_args__ = (
        UniqueConstraint("site_id", "order_id", name="uq_orders_site_order"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Identificación
    site_id = Column(Integer, nullable=False, index=True)
    order_id = Column(Integer, nullable=False, index=True)
    parent_id = Column(Integer, default=0)
    number = Column(String(100), nullable=False)
    currency = Column(String(10))

    # Estados
    status = Column(String(50), nullable=False, index=True)

    # Fechas (GMT)
    date_created = Column(DateTime, nullable=False, index=True)
    date_modified = Column(DateTime)
    date_paid = Column(DateTime)

    # Montos
    discount_total = Column(DECIMAL(18, 6))
    discount_tax = Column(DECIMAL(18, 6))
    shipping_total = Column(DECIMAL(18, 6))
    shipping_tax = Column(DECIMAL(18, 6))
    total = Column(DECIMAL(18, 6), nullable=False)
    total_tax = Column(DECIMAL(18, 6))
    payment_method_title = Column(String(255))

    # Cliente
    customer_note = Column(Text)
    billing_address = Column(JSON)
    shipping_address = Column(JSON)

    # Relationships
    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )
    coupons = relationship(
        "OrderCoupon", back_populates="order", cascade="all, delete-orphan", order_by="OrderCoupon.id"
    )
    notes = relationship(
        "OrderNote", back_populates="order", cascade="all, delete-orphan", order_by="OrderNote.note_id"
    )


class OrderItem(Base):
    """
    Line items de cada orden
    """
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_pk = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)

    item_id = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    product_id = Column(Integer)
    variation_id = Column(Integer)
    sku = Column(String(100))

    # Cantidades
    quantity = Column(Integer, nullable=False)
    price = Column(DECIMAL(18, 6))
    subtotal = Column(DECIMAL(18, 6))
    subtotal_tax = Column(DECIMAL(18, 6))
    total = Column(DECIMAL(18, 6))
    total_tax = Column(DECIMAL(18, 6))

    order = relationship("Order", back_populates="items")


class OrderCoupon(Base):
    """
    Cupones aplicados a una orden
    """
    __tablename__ = "order_coupons"

    id = Column(Integer, primary_key=True, index=True)
    order_pk = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)

    coupon_id = Column(Integer, nullable=False)
    code = Column(String(100), nullable=False)
    discount = Column(DECIMAL(18, 6))
    discount_tax = Column(DECIMAL(18, 6))

    order = relationship("Order", back_populates="coupons")


class OrderNote(Base):
    """
    Notas de una orden (inmutables una vez creadas)
    """
    __tablename__ = "order_notes"
    __table_args__ = (
        UniqueConstraint("site_id", "order_id", "note_id", name="uq_order_notes_site_order_note"),
    )

    id = Column(Integer, primary_key=True, index=True)
    order_pk = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)

    site_id = Column(Integer, nullable=False, index=True)
    order_id = Column(Integer, nullable=False, index=True)
    note_id = Column(Integer, nullable=False)

    date_created = Column(DateTime, nullable=False)
    note = Column(Text)
    is_customer_note = Column(Boolean, default=False)
    author = Column(String(255))

    order = relationship("Order", back_populates="notes")
