# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Plano.
"""

from pydantic import BaseModel, Field
from typing import Optional


# Schema base para Plano
class PlanoBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    valor: float = Field(..., ge=0)
    duracao_dias: int = Field(..., gt=0)


# Schema para criação de Plano
class PlanoCreate(PlanoBase):
    pass


# Schema para atualização de Plano
class PlanoUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    valor: Optional[float] = Field(None, ge=0)
    duracao_dias: Optional[int] = Field(None, gt=0)


# Schema para leitura/retorno de Plano
class PlanoRead(PlanoBase):
    id: str

    class Config:
        from_attributes = True
