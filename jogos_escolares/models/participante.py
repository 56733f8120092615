from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from jogos_escolares.database import Base
from datetime import datetime

ATLETA = "atleta"
TECNICO = "tecnico"

class Participante(Base):
    """Atleta ou técnico de uma escola. Os dois tipos dividem a tabela para que o id seja único nas inscrições."""
    __tablename__ = "participantes"

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(String(10), nullable=False, default=ATLETA)
    escola_id = Column(Integer, ForeignKey("escolas.id"), nullable=False)

    nome = Column(String(100), index=True, nullable=False)
    sexo = Column(String(10), nullable=False)  # Masculino, Feminino
    data_nascimento = Column(Date, nullable=False)
    cpf = Column(String(14), index=True, nullable=True)
    rg = Column(String(20), nullable=True)
    nis = Column(String(20), nullable=True)
    data_cadastro = Column(DateTime, default=datetime.utcnow)

    # Atletas
    nome_mae = Column(String(100), nullable=True)
    cpf_mae = Column(String(14), nullable=True)

    # Técnicos
    cref = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    telefone = Column(String(20), nullable=True)

    escola = relationship("Escola", back_populates="participantes")
    inscricoes = relationship("Inscricao", back_populates="participante")
