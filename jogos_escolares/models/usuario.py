from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from jogos_escolares.database import Base

# Papéis globais
ADMIN = "admin"
PRODUCER = "producer"
SCHOOL_ADMIN = "school_admin"
PARTICIPANT = "participant"
PAPEIS_GLOBAIS = (ADMIN, PRODUCER, SCHOOL_ADMIN, PARTICIPANT)

class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    nome = Column(String)
    hashed_password = Column(String, nullable=True)
    role = Column(String, nullable=False, default=PARTICIPANT)
    cpf = Column(String(14), nullable=True)
    telefone = Column(String(20), nullable=True)
    ativo = Column(Boolean, default=True)

    # Preenchido para school_admin e participant
    escola_id = Column(Integer, ForeignKey("escolas.id", use_alter=True, name="fk_usuarios_escola_id"), nullable=True)

    escola = relationship("Escola", back_populates="usuarios", foreign_keys=[escola_id])
    permissoes = relationship("Permissao", back_populates="usuario", cascade="all, delete-orphan")
