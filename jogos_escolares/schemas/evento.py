# jogos_escolares/schemas/evento.py
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class EventoBase(BaseModel):
    nome: str = Field(..., max_length=150)
    local: Optional[str] = Field(None, max_length=150)
    descricao: Optional[str] = None
    data_inicio: datetime
    data_fim: datetime
    inscricao_individual_inicio: Optional[datetime] = None
    inscricao_individual_fim: Optional[datetime] = None
    inscricao_coletiva_inicio: Optional[datetime] = None
    inscricao_coletiva_fim: Optional[datetime] = None

class EventoCreate(EventoBase):
    status_admin: Optional[str] = Field("RASCUNHO", max_length=20)

class EventoUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=150)
    local: Optional[str] = Field(None, max_length=150)
    descricao: Optional[str] = None
    data_inicio: Optional[datetime] = None
    data_fim: Optional[datetime] = None
    inscricao_individual_inicio: Optional[datetime] = None
    inscricao_individual_fim: Optional[datetime] = None
    inscricao_coletiva_inicio: Optional[datetime] = None
    inscricao_coletiva_fim: Optional[datetime] = None

class EventoStatusUpdate(BaseModel):
    status_admin: str

class EventoRead(EventoBase):
    id: int
    status_admin: str
    criado_por_id: Optional[int] = None
    # Campos calculados na leitura
    status_tempo: str = ""
    editavel: bool = False
    inscricoes_individuais_abertas: bool = False
    inscricoes_coletivas_abertas: bool = False
    meu_papel: Optional[str] = None

    class Config:
        from_attributes = True

class EventoModalidadesUpdate(BaseModel):
    modalidade_ids: List[int] = []
