# -*- coding: utf-8 -*-
"""
Engine, sessões e criação das tabelas.

A mesma fábrica de engine atende o PostgreSQL hospedado, o SQLite em arquivo
do ambiente local e o SQLite em memória dos testes.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from academia.config import DATABASE_URL

URLS_EM_MEMORIA = ("sqlite://", "sqlite:///:memory:")


def normalizar_url(url: str) -> str:
    # Render e Heroku ainda entregam o prefixo antigo
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def criar_engine(url: str):
    url = normalizar_url(url)
    if url in URLS_EM_MEMORIA:
        # Uma única conexão compartilhada, senão cada sessão veria um banco vazio
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)

    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


engine = criar_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def criar_tabelas(bind=None):
    """Cria as tabelas que ainda não existem (``bind`` padrão: a engine da aplicação)."""
    from academia.models import aluno, plano, transacao, usuario  # noqa: F401 (registra no metadata)

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
