from sqlalchemy import Column, Integer, Numeric, String

from .database import Base

class Flight(Base):
    __tablename__ = "flights"

    id = Column(Integer, primary_key=True, autoincrement=True)
    origin = Column(String(64), nullable=False, index=True)
    destination = Column(String(64), nullable=False, index=True)
    price = Column(Numeric(10, 2, asdecimal=True), nullable=False, index=True)
    discount_code = Column(String(64), nullable=True)
