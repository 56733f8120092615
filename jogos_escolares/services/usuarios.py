# -*- coding: utf-8 -*-
"""
Regras de criação de usuários.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.usuario import Usuario, ADMIN, PRODUCER, SCHOOL_ADMIN, PARTICIPANT, PAPEIS_GLOBAIS

# Quem pode criar quem (admin cria qualquer papel)
PAPEIS_CRIAVEIS = {
    PRODUCER: {PRODUCER, SCHOOL_ADMIN, PARTICIPANT},
    SCHOOL_ADMIN: {PARTICIPANT},
}


def pode_criar_papel(papel_criador: str, papel_alvo: str) -> bool:
    if papel_criador == ADMIN:
        return True
    return papel_alvo in PAPEIS_CRIAVEIS.get(papel_criador, set())


def criar_usuario(db: Session, criador: Optional[Usuario], dados: dict) -> Usuario:
    """
    Cria um usuário validando o papel do criador. Sem criador (cadastro público)
    a checagem de papel é feita por quem chama, como em registrar_produtor.
    """
    papel = dados.get("role")
    if papel not in PAPEIS_GLOBAIS:
        raise ValidationError(f"Papel inválido: {papel}")
    if criador is not None and not pode_criar_papel(criador.role, papel):
        raise ValidationError(f"Usuário com papel {criador.role} não pode criar {papel}.")

    if auth.get_user(db, email=dados["email"]):
        raise ValidationError("Email já registrado")

    escola_id = dados.get("escola_id")
    # school_admin só cria usuários da própria escola
    if criador is not None and criador.role == SCHOOL_ADMIN:
        escola_id = criador.escola_id

    db_user = Usuario(
        email=dados["email"],
        nome=dados.get("nome"),
        hashed_password=auth.get_password_hash(dados["password"]),
        role=papel,
        cpf=dados.get("cpf"),
        telefone=dados.get("telefone"),
        escola_id=escola_id,
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Erro de integridade ao criar usuário: {e}")
        raise ValidationError("Email já registrado")
    db.refresh(db_user)
    return db_user


def registrar_produtor(db: Session, dados: dict) -> Usuario:
    return criar_usuario(db, None, {**dados, "role": PRODUCER})


def obter_usuario(db: Session, usuario_id: int) -> Usuario:
    db_user = db.query(Usuario).filter(Usuario.id == usuario_id).first()
    if db_user is None:
        raise NotFoundError("Usuário não encontrado")
    return db_user


def atualizar_usuario(db: Session, usuario_id: int, dados: dict) -> Usuario:
    db_user = obter_usuario(db, usuario_id)
    dados = dict(dados)

    if "email" in dados and dados["email"] != db_user.email:
        if auth.get_user(db, email=dados["email"]):
            raise ValidationError("Email já está em uso.")
    if "role" in dados and dados["role"] not in PAPEIS_GLOBAIS:
        raise ValidationError(f"Papel inválido: {dados['role']}")

    if "password" in dados:
        db_user.hashed_password = auth.get_password_hash(dados.pop("password"))

    for key, value in dados.items():
        setattr(db_user, key, value)
    db.commit()
    db.refresh(db_user)
    return db_user
