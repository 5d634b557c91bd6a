# academia/schemas/aluno.py
from enum import Enum
import re
from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import date


class StatusAluno(str, Enum):
    ATIVO = "Active"
    INATIVO = "Inactive"
    PENDENTE = "Pending"


def _somente_digitos(v):
    if isinstance(v, str):
        return re.sub(r"\D", "", v)
    return v


def _vazio_para_none(v):
    if isinstance(v, str) and v.strip() == '':
        return None
    return v


class AlunoRead(BaseModel):
    id: str
    nome: str
    whatsapp: str
    plano_id: Optional[str] = None
    data_matricula: date
    proximo_vencimento: date
    status: StatusAluno
    horario_treino: Optional[str] = None

    class Config:
        from_attributes = True


class MatriculaCreate(BaseModel):
    """Dados do formulário de novo aluno (matrícula + primeiro pagamento)."""
    nome: str = Field(..., min_length=1, max_length=100)
    whatsapp: str = Field(..., min_length=8, max_length=15)
    plano_id: str
    horario_treino: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")
    forma_pagamento: str = Field(..., min_length=1, max_length=50)
    data_pagamento: date

    @validator('whatsapp', pre=True)
    def limpar_whatsapp(cls, v):
        return _somente_digitos(v)

    @validator('horario_treino', pre=True)
    def horario_vazio(cls, v):
        return _vazio_para_none(v)


class AlunoUpdate(BaseModel):
    # Plano, datas e status não são editados por aqui
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    whatsapp: Optional[str] = Field(None, min_length=8, max_length=15)
    horario_treino: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")

    @validator('whatsapp', pre=True)
    def limpar_whatsapp(cls, v):
        return _somente_digitos(v)

    @validator('horario_treino', pre=True)
    def horario_vazio(cls, v):
        return _vazio_para_none(v)

    # Omitir é permitido; null apagaria uma coluna obrigatória
    @validator('nome', 'whatsapp')
    def nao_nulo(cls, v):
        if v is None:
            raise ValueError('Campo obrigatório não pode ser nulo')
        return v


class RenovacaoCreate(BaseModel):
    data_pagamento: date
    forma_pagamento: str = Field(..., min_length=1, max_length=50)
    novo_plano_id: Optional[str] = None
    data_competencia: Optional[date] = None

    @validator('novo_plano_id', 'data_competencia', pre=True)
    def vazio_para_none(cls, v):
        return _vazio_para_none(v)


class RenovacaoRead(BaseModel):
    aluno_id: str
    proximo_vencimento: date
    valor: float
    plano_nome: str


class StatusUpdate(BaseModel):
    status: StatusAluno


class HorarioRead(BaseModel):
    horario: str
    alunos: List[AlunoRead] = []
