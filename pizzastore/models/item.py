from pizzastore.database_init import db


class Item(db.Model):
    __tablename__ = "items"
    item_name = db.Column("itemname", db.String(50), primary_key=True)
    ingredients = db.Column("ingredients", db.String(300), nullable=True)
    type_of_item = db.Column("typeofitem", db.String(40), nullable=True)
    price = db.Column("price", db.Numeric(10, 2, asdecimal=False), nullable=False)
    description = db.Column("description", db.Text, nullable=True)

    def __repr__(self):
        return f"<Item {self.item_name} - {self.price}>"
