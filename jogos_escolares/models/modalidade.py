# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para o catálogo global de Modalidades.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from jogos_escolares.database import Base

class Modalidade(Base):
    __tablename__ = "modalidades"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False, index=True)
    tipo = Column(String(20), nullable=False)    # 'individual' ou 'coletiva'
    genero = Column(String(20), nullable=False)  # 'masculino', 'feminino' ou 'misto'
    idade_minima = Column(Integer, nullable=False, default=0)
    idade_maxima = Column(Integer, nullable=False, default=99)
    prova = Column(String(100), nullable=True)   # Ex: 100m Rasos

    eventos = relationship("Evento", secondary="evento_modalidades", back_populates="modalidades")
    vinculos_tecnicos = relationship("VinculoTecnico", secondary="vinculo_tecnico_modalidades",
                                     back_populates="modalidades")
