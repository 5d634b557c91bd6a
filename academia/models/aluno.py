# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Aluno.
"""
from sqlalchemy import Column, String, Date
from academia.database import Base
from academia.models.plano import gerar_id


class Aluno(Base):
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=gerar_id)
    name = Column(String(100), nullable=False, index=True)
    whatsapp = Column(String(20), nullable=False)

    # Sem ForeignKey: excluir um plano não é bloqueado pelos alunos
    plan_id = Column(String(36), nullable=True, index=True)

    enrollment_date = Column(Date, nullable=False)
    next_due_date = Column(Date, nullable=False, index=True)
    status = Column(String(20), nullable=False, default="Active")
    training_time = Column(String(5), nullable=True)
