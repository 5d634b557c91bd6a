# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Plano.

As colunas seguem o esquema legado da base hospedada (snake_case em inglês);
a tradução para os nomes do domínio fica em academia/mapeamento.py.
"""
import uuid

from sqlalchemy import Column, Integer, String, Float
from academia.database import Base


def gerar_id():
    return str(uuid.uuid4())


class Plano(Base):
    __tablename__ = 'plans'

    id = Column(String(36), primary_key=True, default=gerar_id)
    name = Column(String(100), nullable=False)
    value = Column(Float, nullable=False)
    duration_days = Column(Integer, nullable=False)
