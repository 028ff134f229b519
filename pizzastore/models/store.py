from pizzastore.database_init import db


class Store(db.Model):
    __tablename__ = "store"
    store_id = db.Column("storeid", db.Integer, primary_key=True, autoincrement=False)
    address = db.Column("address", db.Text, nullable=False)
    city = db.Column("city", db.String(100), nullable=False)
    state = db.Column("state", db.String(100), nullable=False)
    is_open = db.Column("isopen", db.String(3), nullable=True)
    review_score = db.Column("reviewscore", db.Float, nullable=True)

    def __repr__(self):
        return f"<Store {self.store_id} - {self.city}>"
