# jogos_escolares/schemas/vinculo_tecnico.py
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from .usuario import UsuarioRead

class VinculoTecnicoCreate(BaseModel):
    usuario_id: int
    modalidade_ids: List[int] = []

class VinculoTecnicoUpdate(BaseModel):
    modalidade_ids: List[int] = []

class VinculoTecnicoRead(BaseModel):
    id: int
    escola_id: int
    usuario_id: int
    modalidade_ids: List[int] = []
    data_cadastro: Optional[datetime] = None
    usuario: Optional[UsuarioRead] = None

    class Config:
        from_attributes = True
