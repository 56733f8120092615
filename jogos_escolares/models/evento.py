# jogos_escolares/models/evento.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
from jogos_escolares.database import Base

# Associação evento <-> modalidade. Lista vazia = todas as modalidades liberadas.
evento_modalidades = Table(
    "evento_modalidades",
    Base.metadata,
    Column("evento_id", Integer, ForeignKey("eventos.id"), primary_key=True),
    Column("modalidade_id", Integer, ForeignKey("modalidades.id"), primary_key=True),
)

class Evento(Base):
    __tablename__ = "eventos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(150), nullable=False)
    local = Column(String(150))
    descricao = Column(Text, nullable=True)
    data_inicio = Column(DateTime, nullable=False)
    data_fim = Column(DateTime, nullable=False)

    inscricao_individual_inicio = Column(DateTime, nullable=True)
    inscricao_individual_fim = Column(DateTime, nullable=True)
    inscricao_coletiva_inicio = Column(DateTime, nullable=True)
    inscricao_coletiva_fim = Column(DateTime, nullable=True)

    # RASCUNHO, PUBLICADO, SUSPENSO, CANCELADO, REABERTO
    # O status de tempo (AGENDADO, EM_ANDAMENTO, ENCERRADO) é calculado, nunca salvo.
    status_admin = Column(String(20), nullable=False, default="RASCUNHO")

    criado_por_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)
    data_cadastro = Column(DateTime, default=datetime.utcnow)

    modalidades = relationship("Modalidade", secondary=evento_modalidades, back_populates="eventos")
    permissoes = relationship("Permissao", back_populates="evento", cascade="all, delete-orphan")
    escolas = relationship("Escola", secondary="escola_eventos", back_populates="eventos")
    inscricoes = relationship("Inscricao", back_populates="evento")
