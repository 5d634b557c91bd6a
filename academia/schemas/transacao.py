# academia/schemas/transacao.py
from enum import Enum
from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import date


class TipoTransacao(str, Enum):
    RECEITA = "Receita"
    DESPESA = "Despesa"


class TransacaoBase(BaseModel):
    data: date
    tipo: TipoTransacao
    categoria: str = Field(..., min_length=1, max_length=50)
    valor: float = Field(..., ge=0)
    descricao: str = Field("", max_length=255)
    aluno_id: Optional[str] = None
    forma_pagamento: Optional[str] = None
    data_competencia: Optional[date] = None

    @validator('aluno_id', 'forma_pagamento', 'data_competencia', pre=True)
    def vazio_para_none(cls, v):
        if isinstance(v, str) and v.strip() == '':
            return None
        return v


class TransacaoCreate(TransacaoBase):
    pass


class TransacaoRead(TransacaoBase):
    id: str

    class Config:
        from_attributes = True


class ResumoMensalRead(BaseModel):
    mes: str
    receitas: float
    despesas: float
    saldo: float


class CategoriasRead(BaseModel):
    receita: List[str]
    despesa: List[str]
    formas_pagamento: List[str]
