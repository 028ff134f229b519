from pizzastore.database_init import db


class ItemsInOrder(db.Model):
    __tablename__ = "itemsinorder"
    order_id = db.Column("orderid", db.Integer, db.ForeignKey("foodorder.orderid"), primary_key=True)
    item_name = db.Column("itemname", db.String(50), db.ForeignKey("items.itemname"), primary_key=True)
    quantity = db.Column("quantity", db.Integer, nullable=False)

    order = db.relationship("FoodOrder", back_populates="items")

    def __repr__(self):
        return f"<ItemsInOrder Order {self.order_id} - {self.item_name} x{self.quantity}>"
