# jogos_escolares/models/inscricao.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from jogos_escolares.database import Base
from datetime import datetime

class Inscricao(Base):
    __tablename__ = 'inscricoes'
    __table_args__ = (
        UniqueConstraint('atleta_id', 'evento_id', 'modalidade_id', name='uq_inscricao_atleta_evento_modalidade'),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Atletas e técnicos usam o mesmo campo
    atleta_id = Column(Integer, ForeignKey('participantes.id'), nullable=False)
    evento_id = Column(Integer, ForeignKey('eventos.id'), nullable=False)
    modalidade_id = Column(Integer, ForeignKey('modalidades.id'), nullable=False)
    escola_id = Column(Integer, ForeignKey('escolas.id'), nullable=False)
    data_inscricao = Column(DateTime, default=datetime.utcnow)
    status = Column(String(20), default="Confirmada")  # Confirmada, Pendente, Cancelada

    participante = relationship("Participante", back_populates="inscricoes")
    evento = relationship("Evento", back_populates="inscricoes")
    modalidade = relationship("Modalidade")
