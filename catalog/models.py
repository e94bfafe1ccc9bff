from datetime import datetime

from .extensions import db


def utc_timestamp(value: datetime) -> str:
    # stored naive in UTC
    return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    price = db.Column(db.Integer, nullable=False)  # minor currency units, signed 64-bit
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "created_at": utc_timestamp(self.created_at),
            "updated_at": utc_timestamp(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.name!r}>"
