import os

# Antes de importar a aplicação: banco em memória e log no stderr
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""

from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from academia.auth import Sessao
from academia.database import criar_engine, criar_tabelas, get_db
from academia.schemas.aluno import MatriculaCreate
from academia.schemas.plano import PlanoCreate
from academia.servicos.alunos import matricular_aluno
from academia.servicos.planos import salvar_plano
from academia.store import SqlRecordStore


@pytest.fixture
def engine():
    engine = criar_engine("sqlite://")
    criar_tabelas(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def SessionTeste(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(SessionTeste):
    db = SessionTeste()
    yield db
    db.close()


@pytest.fixture
def store(db):
    return SqlRecordStore(db)


@pytest.fixture
def sessao():
    """Sessão de um usuário logado, válida por uma hora."""
    return Sessao(
        email="dono@academia.com.br",
        access_token="token-de-teste",
        expira_em=datetime.utcnow() + timedelta(hours=1),
        usuario_id=1,
    )


@pytest.fixture
def plano_mensal(sessao, store):
    return salvar_plano(sessao, store, PlanoCreate(nome="Mensal", valor=100, duracao_dias=30)).valor


@pytest.fixture
def plano_trimestral(sessao, store):
    return salvar_plano(sessao, store, PlanoCreate(nome="Trimestral", valor=270, duracao_dias=90)).valor


@pytest.fixture
def aluno_matriculado(sessao, store, plano_mensal):
    """Aluno matriculado em 01/01/2024 no plano mensal."""
    dados = MatriculaCreate(
        nome="Ana Souza",
        whatsapp="(11) 98765-4321",
        plano_id=plano_mensal.id,
        horario_treino="07:00",
        forma_pagamento="PIX",
        data_pagamento=date(2024, 1, 1),
    )
    return matricular_aluno(sessao, store, dados).valor


@pytest.fixture
def client(SessionTeste):
    from main import app

    def override_get_db():
        db = SessionTeste()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "dono@academia.com.br", "password": "senha-forte"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
