# jogos_escolares/models/permissao.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from jogos_escolares.database import Base

OWNER = "owner"
ASSISTANT = "assistant"
OBSERVER = "observer"

class Permissao(Base):
    """Papel de um usuário dentro de um evento. Chave composta (usuario_id, evento_id)."""
    __tablename__ = "permissoes"

    usuario_id = Column(Integer, ForeignKey("usuarios.id"), primary_key=True)
    evento_id = Column(Integer, ForeignKey("eventos.id"), primary_key=True)
    papel = Column(String(20), nullable=False)  # owner, assistant, observer

    usuario = relationship("Usuario", back_populates="permissoes")
    evento = relationship("Evento", back_populates="permissoes")
