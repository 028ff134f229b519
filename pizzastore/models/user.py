from pizzastore.database_init import db


class User(db.Model):
    __tablename__ = "users"
    login = db.Column("login", db.String(50), primary_key=True)
    password = db.Column("password", db.String(30), nullable=False)
    role = db.Column("role", db.String(20), nullable=False, default="customer")
    favorite_items = db.Column("favoriteitems", db.Text, nullable=True)
    phone_num = db.Column("phonenum", db.String(20), nullable=True)

    orders = db.relationship("FoodOrder", back_populates="user", lazy=True)

    def __repr__(self):
        return f"<User {self.login} - {self.role}>"
