# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Modalidade.
"""
from pydantic import BaseModel, Field
from typing import Optional

class ModalidadeBase(BaseModel):
    nome: str = Field(..., max_length=100)
    tipo: str = Field(..., max_length=20)     # individual, coletiva
    genero: str = Field(..., max_length=20)   # masculino, feminino, misto
    idade_minima: int = Field(0, ge=0)
    idade_maxima: int = Field(99, ge=0)
    prova: Optional[str] = Field(None, max_length=100)

class ModalidadeCreate(ModalidadeBase):
    pass

class ModalidadeUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=100)
    tipo: Optional[str] = Field(None, max_length=20)
    genero: Optional[str] = Field(None, max_length=20)
    idade_minima: Optional[int] = Field(None, ge=0)
    idade_maxima: Optional[int] = Field(None, ge=0)
    prova: Optional[str] = Field(None, max_length=100)

class ModalidadeRead(ModalidadeBase):
    id: int
    class Config:
        from_attributes = True

class ProvaRead(ModalidadeRead):
    rotulo: str
