"""
Order Repository - Local storage for orders and order notes

Upserts remote entities keyed by (site_id, identifier) and returns domain
models. ORM rows never leave this module.

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from storefront.core.database import StorageManager
from storefront.domain.order import Address, Order, OrderCouponLine, OrderItem
from storefront.domain.order_note import OrderNote
from storefront import models

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    Repository for cached orders and their notes

    Orders are created or updated on every fetch and never deleted one by one
    (status changes only). Notes are owned by their order and cascade with it.
    """

    def __init__(self, storage: StorageManager):
        self.storage = storage

    # =========================================================================
    # Orders
    # =========================================================================

    def upsert_order(self, order: Order) -> None:
        """Insert or update a single order with its items and coupons"""
        with self.storage.session() as session:
            self._upsert_order(session, order)

    def upsert_orders(self, orders: Iterable[Order]) -> int:
        """
        Insert or update a batch of orders in one transaction

        Returns:
            Number of orders written
        """
        count = 0
        with self.storage.session() as session:
            for order in orders:
                self._upsert_order(session, order)
                count += 1
        logger.debug(f"Upserted {count} orders")
        return count

    def find_order(self, site_id: int, order_id: int) -> Optional[Order]:
        """
        Find order by (site, order ID)

        Returns:
            Order with items and coupons, or None if not stored
        """
        with self.storage.session() as session:
            row = self._load_order_row(session, site_id, order_id)
            return self._to_domain(row) if row else None

    def find_orders(self, site_id: int, status: Optional[str] = None) -> List[Order]:
        """All stored orders of a site, newest first, optionally filtered by status"""
        with self.storage.session() as session:
            query = (
                select(models.Order)
                .where(models.Order.site_id == site_id)
                .options(selectinload(models.Order.items), selectinload(models.Order.coupons))
                .order_by(models.Order.date_created.desc(), models.Order.order_id.desc())
            )
            if status:
                query = query.where(models.Order.status == status)

            return [self._to_domain(row) for row in session.scalars(query)]

    def update_order_status(self, site_id: int, order_id: int, status: str) -> bool:
        """
        Change the status of a stored order

        Returns:
            True if the order was stored and updated
        """
        with self.storage.session() as session:
            row = self._load_order_row(session, site_id, order_id)
            if row is None:
                return False
            row.status = status
            return True

    def delete_orders(self, site_id: Optional[int] = None) -> int:
        """
        Remove stored orders (and, by cascade, their notes)

        Args:
            site_id: Only this site's orders. None removes every order.
        """
        with self.storage.session() as session:
            query = select(models.Order)
            if site_id is not None:
                query = query.where(models.Order.site_id == site_id)

            rows = list(session.scalars(query))
            for row in rows:
                session.delete(row)

        logger.info(f"Deleted {len(rows)} stored orders")
        return len(rows)

    # =========================================================================
    # Order notes
    # =========================================================================

    def upsert_note(self, note: OrderNote) -> bool:
        """
        Insert or update a note under its parent order

        Returns:
            False (and nothing is written) when the parent order isn't stored
        """
        with self.storage.session() as session:
            parent = self._load_order_row(session, note.site_id, note.order_id)
            if parent is None:
                logger.warning(
                    f"Order {note.order_id} (site {note.site_id}) not stored, skipping note {note.note_id}"
                )
                return False
            self._upsert_note(session, parent, note)
            return True

    def upsert_notes(self, site_id: int, order_id: int, notes: Iterable[OrderNote]) -> int:
        """
        Insert or update all notes of an order

        Returns:
            Number of notes written (0 when the parent order isn't stored)
        """
        with self.storage.session() as session:
            parent = self._load_order_row(session, site_id, order_id)
            if parent is None:
                logger.warning(f"Order {order_id} (site {site_id}) not stored, skipping its notes")
                return 0

            count = 0
            for note in notes:
                self._upsert_note(session, parent, note)
                count += 1
            return count

    def find_notes(self, site_id: int, order_id: int) -> List[OrderNote]:
        """Notes of an order, newest first"""
        with self.storage.session() as session:
            rows = session.scalars(
                select(models.OrderNote)
                .where(models.OrderNote.site_id == site_id, models.OrderNote.order_id == order_id)
                .order_by(models.OrderNote.date_created.desc(), models.OrderNote.note_id.desc())
            )
            return [self._note_to_domain(row) for row in rows]

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _load_order_row(session: Session, site_id: int, order_id: int) -> Optional[models.Order]:
        return session.scalars(
            select(models.Order)
            .where(models.Order.site_id == site_id, models.Order.order_id == order_id)
            .options(selectinload(models.Order.items), selectinload(models.Order.coupons))
        ).first()

    def _upsert_order(self, session: Session, order: Order) -> models.Order:
        row = self._load_order_row(session, order.site_id, order.order_id)
        if row is None:
            row = models.Order(site_id=order.site_id, order_id=order.order_id)
            session.add(row)

        row.parent_id = order.parent_id
        row.number = order.number
        row.currency = order.currency
        row.status = order.status
        row.date_created = order.date_created
        row.date_modified = order.date_modified
        row.date_paid = order.date_paid
        row.discount_total = order.discount_total
        row.discount_tax = order.discount_tax
        row.shipping_total = order.shipping_total
        row.shipping_tax = order.shipping_tax
        row.total = order.total
        row.total_tax = order.total_tax
        row.payment_method_title = order.payment_method_title
        row.customer_note = order.customer_note
        row.billing_address = order.billing_address.model_dump() if order.billing_address else None
        row.shipping_address = order.shipping_address.model_dump() if order.shipping_address else None

        # Items and coupons are replaced wholesale; delete-orphan removes the old rows
        row.items = [
            models.OrderItem(
                item_id=item.item_id,
                name=item.name,
                product_id=item.product_id,
                variation_id=item.variation_id,
                sku=item.sku,
                quantity=item.quantity,
                price=item.price,
                subtotal=item.subtotal,
                subtotal_tax=item.subtotal_tax,
                total=item.total,
                total_tax=item.total_tax,
            )
            for item in order.items
        ]
        row.coupons = [
            models.OrderCoupon(
                coupon_id=coupon.coupon_id,
                code=coupon.code,
                discount=coupon.discount,
                discount_tax=coupon.discount_tax,
            )
            for coupon in order.coupons
        ]
        # Later lookups in the same batch must see this row
        session.flush()
        return row

    @staticmethod
    def _upsert_note(session: Session, parent: models.Order, note: OrderNote) -> models.OrderNote:
        row = session.scalars(
            select(models.OrderNote).where(
                models.OrderNote.site_id == note.site_id,
                models.OrderNote.order_id == note.order_id,
                models.OrderNote.note_id == note.note_id,
            )
        ).first()
        if row is None:
            row = models.OrderNote(site_id=note.site_id, order_id=note.order_id, note_id=note.note_id)
            parent.notes.append(row)

        row.date_created = note.date_created
        row.note = note.note
        row.is_customer_note = note.is_customer_note
        row.author = note.author
        return row

    @staticmethod
    def _to_domain(row: models.Order) -> Order:
        return Order(
            site_id=row.site_id,
            order_id=row.order_id,
            parent_id=row.parent_id or 0,
            number=row.number,
            status=row.status,
            currency=row.currency or "",
            customer_note=row.customer_note,
            date_created=row.date_created,
            date_modified=row.date_modified,
            date_paid=row.date_paid,
            discount_total=row.discount_total,
            discount_tax=row.discount_tax,
            shipping_total=row.shipping_total,
            shipping_tax=row.shipping_tax,
            total=row.total,
            total_tax=row.total_tax,
            payment_method_title=row.payment_method_title or "",
            billing_address=Address(**row.billing_address) if row.billing_address else None,
            shipping_address=Address(**row.shipping_address) if row.shipping_address else None,
            items=[
                OrderItem(
                    item_id=item.item_id,
                    name=item.name,
                    product_id=item.product_id or 0,
                    variation_id=item.variation_id or 0,
                    sku=item.sku,
                    quantity=item.quantity,
                    price=item.price,
                    subtotal=item.subtotal,
                    subtotal_tax=item.subtotal_tax,
                    total=item.total,
                    total_tax=item.total_tax,
                )
                for item in row.items
            ],
            coupons=[
                OrderCouponLine(
                    coupon_id=coupon.coupon_id,
                    code=coupon.code,
                    discount=coupon.discount,
                    discount_tax=coupon.discount_tax,
                )
                for coupon in row.coupons
            ],
        )

    @staticmethod
    def _note_to_domain(row: models.OrderNote) -> OrderNote:
        return OrderNote(
            site_id=row.site_id,
            order_id=row.order_id,
            note_id=row.note_id,
            date_created=row.date_created,
            note=row.note or "",
            is_customer_note=bool(row.is_customer_note),
            author=row.author or "",
        )
