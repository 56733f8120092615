# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida das variáveis de ambiente (arquivo .env).
"""
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./jogos_escolares.db")
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 8))
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")
    LOG_FILE = os.environ.get("LOG_FILE")  # None = loga no console

    # Primeiro administrador criado na inicialização
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@jogosescolares.com.br")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")
