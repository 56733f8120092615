# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy para a aplicação FastAPI.
"""

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jogos_escolares.config import Config

DATABASE_URL = Config.DATABASE_URL

# Se for PostgreSQL no Render, ajusta o prefixo se necessário
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

engine_kwargs = {}
if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}

if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
    # Banco em memória: uma única conexão compartilhada, senão cada sessão vê um banco vazio
    engine_kwargs["poolclass"] = StaticPool
else:
    # pool_pre_ping evita o erro "SSL connection closed"; pool_recycle evita timeouts do banco
    engine_kwargs["pool_pre_ping"] = True
    engine_kwargs["pool_recycle"] = 3600

engine = create_engine(DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Função para obter uma sessão do banco de dados (usada com Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
