# jogos_escolares/schemas/participante.py
from pydantic import BaseModel, Field, EmailStr, validator
from typing import Optional, List
from datetime import date, datetime
from .modalidade import ProvaRead

class ParticipanteBase(BaseModel):
    tipo: str = Field("atleta", max_length=10)  # atleta, tecnico
    nome: str = Field(..., max_length=100)
    sexo: str = Field(..., max_length=10)       # Masculino, Feminino
    data_nascimento: date
    cpf: Optional[str] = Field(None, max_length=14)
    rg: Optional[str] = Field(None, max_length=20)
    nis: Optional[str] = Field(None, max_length=20)
    nome_mae: Optional[str] = Field(None, max_length=100)
    cpf_mae: Optional[str] = Field(None, max_length=14)
    cref: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)

    @validator('email', pre=True)
    def empty_str_to_none(cls, v):
        if isinstance(v, str) and v.strip() == '':
            return None
        return v

class ParticipanteCreate(ParticipanteBase):
    escola_id: Optional[int] = None  # Obrigatório para produtores; school_admin usa a própria escola

class ParticipanteUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=100)
    sexo: Optional[str] = Field(None, max_length=10)
    data_nascimento: Optional[date] = None
    cpf: Optional[str] = Field(None, max_length=14)
    rg: Optional[str] = Field(None, max_length=20)
    nis: Optional[str] = Field(None, max_length=20)
    nome_mae: Optional[str] = Field(None, max_length=100)
    cpf_mae: Optional[str] = Field(None, max_length=14)
    cref: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)

class ParticipanteRead(ParticipanteBase):
    id: int
    escola_id: int
    data_cadastro: Optional[datetime] = None
    idade: Optional[int] = None
    class Config:
        from_attributes = True

class FunilRead(BaseModel):
    tipos: List[str] = []
    nomes: List[str] = []
    provas: List[ProvaRead] = []
    prova_selecionada_id: Optional[int] = None
