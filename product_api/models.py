from datetime import datetime, timezone

from mongoengine import DateTimeField, Document, FloatField, StringField


def utc_now() -> datetime:
    """Current UTC time, naive and truncated to milliseconds like MongoDB stores it."""
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class Product(Document):
    name = StringField(required=True, min_length=1)
    price = FloatField(required=True, min_value=0)
    createdAt = DateTimeField()
    updatedAt = DateTimeField()

    meta = {
        "collection": "products",
        "indexes": ["-createdAt"],
        # documents written by other clients may carry extra fields such as __v
        "strict": False,
    }

    def clean(self):
        if self.name is not None:
            self.name = self.name.strip()

    def save(self, *args, **kwargs):
        now = utc_now()
        if self.createdAt is None:
            self.createdAt = now
        self.updatedAt = now
        return super().save(*args, **kwargs)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "createdAt": self.createdAt,
            "updatedAt": self.updatedAt,
        }
