# jogos_escolares/schemas/escola.py
from pydantic import BaseModel, Field, EmailStr, validator
from typing import Optional, List
from datetime import datetime
from .usuario import UsuarioRead

class EscolaBase(BaseModel):
    nome: str = Field(..., min_length=3, max_length=150)
    inep: str = Field(..., min_length=1, max_length=8)
    cnpj: Optional[str] = Field(None, max_length=18)
    municipio: Optional[str] = Field(None, max_length=100)
    endereco: Optional[str] = Field(None, max_length=255)
    bairro: Optional[str] = Field(None, max_length=100)
    cep: Optional[str] = Field(None, max_length=9)
    tipo: Optional[str] = Field(None, max_length=20)    # Publica, Privada
    esfera: Optional[str] = Field(None, max_length=20)  # Municipal, Estadual, Federal
    nome_diretor: Optional[str] = Field(None, max_length=100)
    telefone_fixo: Optional[str] = Field(None, max_length=20)
    celular: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    nome_responsavel: Optional[str] = Field(None, max_length=100)

    @validator('email', pre=True)
    def empty_str_to_none(cls, v):
        """Converte strings vazias para None antes da validação principal."""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v

class VerificacaoInep(BaseModel):
    inep: str = Field(..., min_length=1, max_length=8)
    evento_id: int

class CredenciaisResponsavel(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    nome: Optional[str] = None
    cpf: Optional[str] = Field(None, max_length=14)
    telefone: Optional[str] = Field(None, max_length=20)

class EscolaCadastro(BaseModel):
    """Autocadastro: dados institucionais + credenciais do responsável para um evento."""
    evento_id: int
    escola: EscolaBase
    responsavel: CredenciaisResponsavel

class EscolaUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=3, max_length=150)
    inep: Optional[str] = Field(None, min_length=1, max_length=8)
    cnpj: Optional[str] = Field(None, max_length=18)
    municipio: Optional[str] = Field(None, max_length=100)
    endereco: Optional[str] = Field(None, max_length=255)
    bairro: Optional[str] = Field(None, max_length=100)
    cep: Optional[str] = Field(None, max_length=9)
    tipo: Optional[str] = Field(None, max_length=20)
    esfera: Optional[str] = Field(None, max_length=20)
    nome_diretor: Optional[str] = Field(None, max_length=100)
    telefone_fixo: Optional[str] = Field(None, max_length=20)
    celular: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    nome_responsavel: Optional[str] = Field(None, max_length=100)

class EscolaEventosUpdate(BaseModel):
    evento_ids: List[int] = []

class EscolaRead(EscolaBase):
    id: int
    responsavel_id: Optional[int] = None
    data_cadastro: Optional[datetime] = None
    evento_ids: List[int] = []

    class Config:
        from_attributes = True

class CadastroResultado(BaseModel):
    escola: EscolaRead
    usuario: UsuarioRead
    mesclada: bool
    access_token: str
    token_type: str = "bearer"
