# jogos_escolares/schemas/inscricao.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from .modalidade import ModalidadeRead

class InscricaoBase(BaseModel):
    atleta_id: int
    evento_id: int
    modalidade_id: int

class InscricaoCreate(InscricaoBase):
    escola_id: Optional[int] = None

class InscricaoRead(InscricaoBase):
    id: int
    escola_id: int
    data_inscricao: datetime
    status: str
    modalidade: Optional[ModalidadeRead] = None

    class Config:
        from_attributes = True
