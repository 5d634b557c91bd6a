# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para as transações do financeiro (livro caixa).
"""
from sqlalchemy import Column, String, Float, Date
from academia.database import Base
from academia.models.plano import gerar_id


class Transacao(Base):
    __tablename__ = 'transactions'

    id = Column(String(36), primary_key=True, default=gerar_id)
    date = Column(Date, nullable=False, index=True)
    type = Column(String(20), nullable=False)  # 'Receita' ou 'Despesa'
    category = Column(String(50), nullable=False)
    value = Column(Float, nullable=False)
    description = Column(String(255), nullable=False, default="")

    # Referência apenas informativa ao aluno (sem cascata)
    student_id = Column(String(36), nullable=True, index=True)

    payment_method = Column(String(50), nullable=True)
    competence_date = Column(Date, nullable=True)
