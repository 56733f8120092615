from pydantic import BaseModel
from typing import Optional
from .usuario import UsuarioRead

class MembroCreate(BaseModel):
    usuario_id: int
    papel: str  # assistant, observer

class MembroUpdate(BaseModel):
    papel: str

class MembroRead(BaseModel):
    usuario_id: int
    evento_id: int
    papel: str
    usuario: Optional[UsuarioRead] = None
    class Config:
        from_attributes = True
