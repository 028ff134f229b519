from flask_sqlalchemy import SQLAlchemy

# single db instance shared by the app factory, the seeder and the models
db = SQLAlchemy()
