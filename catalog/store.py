import logging
from typing import List

from .extensions import db
from .models import Product

logger = logging.getLogger(__name__)


class ProductStore:
    """Create/list access to the products table.

    Validation happens before this layer; the store persists whatever it
    is handed.
    """

    def list(self) -> List[Product]:
        return db.session.execute(db.select(Product).order_by(Product.id.asc())).scalars().all()

    def create(self, name: str, price: int) -> Product:
        product = Product(name=name, price=price)
        db.session.add(product)
        db.session.commit()
        logger.info("Created product id=%s name=%r price=%s", product.id, product.name, product.price)
        return product

    def count(self) -> int:
        return db.session.execute(db.select(db.func.count(Product.id))).scalar_one()


store = ProductStore()
