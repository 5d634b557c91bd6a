# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para a gestão da academia.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import create_first_user
from academia.auth import servico_autenticacao
from academia.config import ENVIRONMENT, FRONTEND_URL, LOG_FILE, LOG_LEVEL
from academia.database import criar_tabelas
from academia.routes import (alunos_fastapi, auth_fastapi, dashboard_fastapi,
                             financeiro_fastapi, planos_fastapi)

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=LOG_FILE
)
logger = logging.getLogger(__name__)


def registrar_evento_sessao(evento, sessao):
    logger.info("Sessão: %s (%s)", evento.value, sessao.email if sessao else "-")


servico_autenticacao.subscribe(registrar_evento_sessao)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas no banco de dados com tratamento de erros
    try:
        criar_tabelas()
        logger.info("Tabelas criadas com sucesso!")
    except Exception:
        logger.exception("Erro ao criar tabelas")
        raise
    create_first_user.create_first_user()
    yield


docs_url = "/docs" if ENVIRONMENT != "production" else None
redoc_url = "/redoc" if ENVIRONMENT != "production" else None

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Gestão de Academia",
    description="Alunos, planos, financeiro e radar de cobrança da academia",
    version="1.0.0",
    docs_url=docs_url,   # Será None em produção (desativa /docs)
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)

origins = [
    FRONTEND_URL,
    "http://localhost:5700",
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Montagem dos routers
app.include_router(alunos_fastapi.router, prefix="/api/v1/alunos")
app.include_router(planos_fastapi.router, prefix="/api/v1/planos")
app.include_router(financeiro_fastapi.router, prefix="/api/v1/financeiro")
app.include_router(dashboard_fastapi.router, prefix="/api/v1/dashboard")
app.include_router(auth_fastapi.router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Gestão de Academia",
        "documentacao": "/docs",
        "endpoints": [
            {"alunos": "/api/v1/alunos"},
            {"planos": "/api/v1/planos"},
            {"financeiro": "/api/v1/financeiro/transacoes"},
            {"dashboard": "/api/v1/dashboard"},
            {"auth": "/api/v1/auth/token"},
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", reload=True)
