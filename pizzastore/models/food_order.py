from pizzastore.database_init import db


class FoodOrder(db.Model):
    __tablename__ = "foodorder"
    order_id = db.Column("orderid", db.Integer, primary_key=True, autoincrement=False)
    login = db.Column("login", db.String(50), db.ForeignKey("users.login"), nullable=False)
    store_id = db.Column("storeid", db.Integer, db.ForeignKey("store.storeid"), nullable=False)
    total_price = db.Column("totalprice", db.Numeric(10, 2, asdecimal=False), nullable=False)
    order_timestamp = db.Column("ordertimestamp", db.DateTime, server_default=db.func.now())
    order_status = db.Column("orderstatus", db.String(50), default="Pending")

    user = db.relationship("User", back_populates="orders")
    items = db.relationship("ItemsInOrder", back_populates="order", lazy=True)

    def __repr__(self):
        return f"<FoodOrder {self.order_id} - User {self.login}>"
