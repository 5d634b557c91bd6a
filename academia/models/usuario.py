from sqlalchemy import Column, Integer, String
from academia.database import Base


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)

    # E-mail é a chave de login
    email = Column(String, unique=True, index=True, nullable=False)

    nome = Column(String)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="administrador")
