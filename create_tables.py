from droword.db import models  # noqa: F401  # Registers tables on the metadata
from droword.db.base import Base
from droword.db.session import engine

if __name__ == "__main__":
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created.")
