# jogos_escolares/models/vinculo_tecnico.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from jogos_escolares.database import Base

# Modalidades que o técnico pode gerenciar pela escola
vinculo_tecnico_modalidades = Table(
    "vinculo_tecnico_modalidades",
    Base.metadata,
    Column("vinculo_id", Integer, ForeignKey("vinculos_tecnicos.id"), primary_key=True),
    Column("modalidade_id", Integer, ForeignKey("modalidades.id"), primary_key=True),
)

class VinculoTecnico(Base):
    """Usuário atuando como técnico de uma escola."""
    __tablename__ = "vinculos_tecnicos"
    __table_args__ = (
        UniqueConstraint("escola_id", "usuario_id", name="uq_vinculo_tecnico_escola_usuario"),
    )

    id = Column(Integer, primary_key=True, index=True)
    escola_id = Column(Integer, ForeignKey("escolas.id"), nullable=False, index=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False)
    data_cadastro = Column(DateTime, default=datetime.utcnow)

    escola = relationship("Escola")
    usuario = relationship("Usuario")
    modalidades = relationship("Modalidade", secondary=vinculo_tecnico_modalidades,
                               back_populates="vinculos_tecnicos")

    @property
    def modalidade_ids(self):
        return sorted(m.id for m in self.modalidades)
