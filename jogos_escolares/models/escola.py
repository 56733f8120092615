# jogos_escolares/models/escola.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
from jogos_escolares.database import Base

escola_eventos = Table(
    "escola_eventos",
    Base.metadata,
    Column("escola_id", Integer, ForeignKey("escolas.id"), primary_key=True),
    Column("evento_id", Integer, ForeignKey("eventos.id"), primary_key=True),
)

class Escola(Base):
    __tablename__ = "escolas"

    id = Column(Integer, primary_key=True, index=True)
    # Código INEP: chave natural, no máximo uma escola por INEP no sistema
    inep = Column(String(8), unique=True, index=True, nullable=False)
    nome = Column(String(150), nullable=False)
    cnpj = Column(String(18), nullable=True)
    municipio = Column(String(100), nullable=True)
    endereco = Column(String(255), nullable=True)
    bairro = Column(String(100), nullable=True)
    cep = Column(String(9), nullable=True)
    tipo = Column(String(20), nullable=True)    # Publica, Privada
    esfera = Column(String(20), nullable=True)  # Municipal, Estadual, Federal
    nome_diretor = Column(String(100), nullable=True)
    telefone_fixo = Column(String(20), nullable=True)
    celular = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    nome_responsavel = Column(String(100), nullable=True)
    data_cadastro = Column(DateTime, default=datetime.utcnow)

    responsavel_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)

    # Campo legado (um único evento). Use "eventos"; mantido para cadastros antigos.
    evento_id = Column(Integer, ForeignKey("eventos.id"), nullable=True)

    eventos = relationship("Evento", secondary=escola_eventos, back_populates="escolas")
    responsavel = relationship("Usuario", foreign_keys=[responsavel_id], post_update=True)
    usuarios = relationship("Usuario", back_populates="escola", foreign_keys="Usuario.escola_id")
    participantes = relationship("Participante", back_populates="escola")

    @property
    def evento_ids(self):
        """Todos os eventos da escola, somando o campo legado."""
        ids = {e.id for e in self.eventos}
        if self.evento_id is not None:
            ids.add(self.evento_id)
        return sorted(ids)
