# -*- coding: utf-8 -*-
"""
Fronteira única entre os nomes de campo do domínio (português) e os nomes
de coluna do banco (esquema legado em snake_case, em inglês).

Cada entidade tem uma tabela explícita campo -> coluna. As tabelas são
bijetoras, então todo campo faz ida e volta sem perda.
"""
from academia.schemas.aluno import AlunoRead
from academia.schemas.plano import PlanoRead
from academia.schemas.transacao import TransacaoRead

PLANOS = "planos"
ALUNOS = "alunos"
TRANSACOES = "transacoes"

CAMPOS_PLANO = {
    "id": "id",
    "nome": "name",
    "valor": "value",
    "duracao_dias": "duration_days",
}

CAMPOS_ALUNO = {
    "id": "id",
    "nome": "name",
    "whatsapp": "whatsapp",
    "plano_id": "plan_id",
    "data_matricula": "enrollment_date",
    "proximo_vencimento": "next_due_date",
    "status": "status",
    "horario_treino": "training_time",
}

CAMPOS_TRANSACAO = {
    "id": "id",
    "data": "date",
    "tipo": "type",
    "categoria": "category",
    "valor": "value",
    "descricao": "description",
    "aluno_id": "student_id",
    "forma_pagamento": "payment_method",
    "data_competencia": "competence_date",
}

TABELAS = {
    PLANOS: CAMPOS_PLANO,
    ALUNOS: CAMPOS_ALUNO,
    TRANSACOES: CAMPOS_TRANSACAO,
}

SCHEMAS = {
    PLANOS: PlanoRead,
    ALUNOS: AlunoRead,
    TRANSACOES: TransacaoRead,
}

_COLUNAS = {
    entidade: {coluna: campo for campo, coluna in campos.items()}
    for entidade, campos in TABELAS.items()
}

for _entidade, _campos in TABELAS.items():
    if len(_COLUNAS[_entidade]) != len(_campos):
        raise RuntimeError(f"Mapeamento de '{_entidade}' não é bijetor")


def _valor_store(valor):
    # Enums viram o valor gravado no banco ("Active", "Receita", ...)
    return getattr(valor, "value", valor)


def para_store(entidade: str, campos: dict) -> dict:
    """Converte um dicionário de campos do domínio em colunas do banco."""
    tabela = TABELAS[entidade]
    desconhecidos = set(campos) - set(tabela)
    if desconhecidos:
        raise KeyError(f"Campos desconhecidos para '{entidade}': {sorted(desconhecidos)}")
    return {tabela[campo]: _valor_store(valor) for campo, valor in campos.items()}


def do_store(entidade: str, registro: dict) -> dict:
    """Converte uma linha do banco (colunas) em campos do domínio."""
    colunas = _COLUNAS[entidade]
    desconhecidas = set(registro) - set(colunas)
    if desconhecidas:
        raise KeyError(f"Colunas desconhecidas para '{entidade}': {sorted(desconhecidas)}")
    return {colunas[coluna]: valor for coluna, valor in registro.items()}


def para_schema(entidade: str, registro: dict):
    """Linha do banco -> schema de leitura do domínio."""
    return SCHEMAS[entidade](**do_store(entidade, registro))
