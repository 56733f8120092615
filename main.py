# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para o sistema de gestão de Jogos Escolares.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from jogos_escolares.config import Config
from jogos_escolares.database import engine, Base
from jogos_escolares.exceptions import ValidationError, NotFoundError
from jogos_escolares import models  # registra todos os modelos no Base
from jogos_escolares.routes import (auth_fastapi, usuarios_fastapi, eventos_fastapi, escolas_fastapi,
                                    modalidades_fastapi, participantes_fastapi, inscricoes_fastapi)
import create_first_user


logging_kwargs = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}
if Config.LOG_FILE:
    logging_kwargs["filename"] = Config.LOG_FILE
logging.basicConfig(**logging_kwargs)

# Cria as tabelas no banco de dados
try:
    Base.metadata.create_all(bind=engine)
    logging.info("Tabelas criadas com sucesso!")
except Exception as e:
    logging.error(f"Erro ao criar tabelas: {e}")
    raise


env = Config.ENVIRONMENT

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Jogos Escolares",
    description="API para gestão de eventos esportivos escolares: escolas, atletas, modalidades e inscrições",
    version="1.0.0",
    docs_url="/docs" if env != "production" else None,
    redoc_url="/redoc" if env != "production" else None,
    openapi_url="/openapi.json" if env != "production" else None
)

origins = [
    Config.FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Erros de regra de negócio viram respostas no mesmo formato do HTTPException
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.mensagem})

@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.mensagem})


# Montagem dos routers
app.include_router(auth_fastapi.router)
app.include_router(usuarios_fastapi.router)
app.include_router(eventos_fastapi.router, prefix="/api/v1/eventos")
app.include_router(escolas_fastapi.router, prefix="/api/v1/escolas")
app.include_router(modalidades_fastapi.router, prefix="/api/v1/modalidades")
app.include_router(participantes_fastapi.router, prefix="/api/v1/participantes")
app.include_router(inscricoes_fastapi.router, prefix="/api/v1/inscricoes")


create_first_user.create_first_user()


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Jogos Escolares",
        "documentacao": "/docs",
        "endpoints": [
            {"auth": "/api/v1/auth"},
            {"eventos": "/api/v1/eventos"},
            {"escolas": "/api/v1/escolas"},
            {"modalidades": "/api/v1/modalidades"},
            {"participantes": "/api/v1/participantes"},
            {"inscricoes": "/api/v1/inscricoes"},
            {"usuarios": "/api/v1/usuarios"}
        ]
    }
