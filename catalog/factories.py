from typing import List, Optional

from faker import Faker

from .extensions import db
from .models import Product

fake = Faker()


def make_product(*, name: Optional[str] = None, price: Optional[int] = None) -> Product:
    product = Product(
        name=name if name is not None else fake.word(),
        price=price if price is not None else fake.random_int(min=100, max=1000),
    )
    db.session.add(product)
    db.session.commit()
    return product


def make_products(count_: int = 1) -> List[Product]:
    products: List[Product] = []
    for _ in range(count_):
        products.append(make_product())
    return products
