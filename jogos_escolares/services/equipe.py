# -*- coding: utf-8 -*-
"""
Equipe do evento: papéis owner / assistant / observer por (usuário, evento).

O owner é criado junto com o evento e não pode ser concedido, alterado nem
removido por aqui. Apenas produtores e administradores entram em equipes.
"""
import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session, joinedload

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.permissao import Permissao, OWNER, ASSISTANT, OBSERVER
from jogos_escolares.models.usuario import Usuario, ADMIN, PRODUCER
from jogos_escolares.services.ciclo_evento import obter_evento

PAPEIS_EQUIPE = (ASSISTANT, OBSERVER)
PAPEIS_ELEGIVEIS = (PRODUCER, ADMIN)


def _validar_papel(papel: str) -> None:
    if papel == OWNER:
        raise ValidationError("O papel de proprietário (owner) não pode ser atribuído pela equipe.")
    if papel not in PAPEIS_EQUIPE:
        raise ValidationError(f"Papel inválido: {papel}")


def _obter_permissao(db: Session, usuario_id: int, evento_id: int) -> Optional[Permissao]:
    return db.query(Permissao).filter(
        Permissao.usuario_id == usuario_id,
        Permissao.evento_id == evento_id,
    ).with_for_update().first()


def adicionar_membro(db: Session, usuario_id: int, evento_id: int, papel: str) -> Permissao:
    _validar_papel(papel)
    obter_evento(db, evento_id)
    usuario = db.query(Usuario).filter(Usuario.id == usuario_id).first()
    if usuario is None:
        raise NotFoundError("Usuário não encontrado")
    if usuario.role not in PAPEIS_ELEGIVEIS:
        raise ValidationError("Apenas produtores ou administradores podem fazer parte da equipe do evento.")

    permissao = _obter_permissao(db, usuario_id, evento_id)
    if permissao is None:
        permissao = Permissao(usuario_id=usuario_id, evento_id=evento_id, papel=papel)
        db.add(permissao)
    elif permissao.papel == OWNER:
        logging.warning(f"Tentativa de alterar o owner do evento {evento_id} via equipe (usuário {usuario_id})")
        raise ValidationError("O proprietário do evento não pode ter o papel alterado.")
    else:
        permissao.papel = papel
    db.commit()
    db.refresh(permissao)
    return permissao


def atualizar_papel(db: Session, usuario_id: int, evento_id: int, papel: str) -> Permissao:
    _validar_papel(papel)
    permissao = _obter_permissao(db, usuario_id, evento_id)
    if permissao is None:
        raise NotFoundError("Membro não encontrado na equipe do evento")
    if permissao.papel == OWNER:
        logging.warning(f"Tentativa de alterar o owner do evento {evento_id} (usuário {usuario_id})")
        raise ValidationError("O proprietário do evento não pode ter o papel alterado.")
    permissao.papel = papel
    db.commit()
    db.refresh(permissao)
    return permissao


def remover_membro(db: Session, usuario_id: int, evento_id: int) -> None:
    permissao = _obter_permissao(db, usuario_id, evento_id)
    if permissao is None:
        raise NotFoundError("Membro não encontrado na equipe do evento")
    if permissao.papel == OWNER:
        logging.warning(f"Tentativa de remover o owner do evento {evento_id} (usuário {usuario_id})")
        raise ValidationError("O proprietário do evento não pode ser removido.")
    db.delete(permissao)
    db.commit()


def listar_equipe(db: Session, evento_id: int) -> List[Permissao]:
    obter_evento(db, evento_id)
    return db.query(Permissao).options(joinedload(Permissao.usuario)).filter(
        Permissao.evento_id == evento_id
    ).order_by(Permissao.usuario_id).all()


def listar_candidatos(db: Session, evento_id: int, busca: Optional[str] = None) -> List[Usuario]:
    """Produtores e administradores que ainda não têm papel no evento."""
    obter_evento(db, evento_id)
    ja_na_equipe = select(Permissao.usuario_id).where(Permissao.evento_id == evento_id)
    query = db.query(Usuario).filter(
        Usuario.role.in_(PAPEIS_ELEGIVEIS),
        Usuario.ativo == True,
        ~Usuario.id.in_(ja_na_equipe),
    )
    if busca:
        query = query.filter(or_(Usuario.nome.ilike(f"%{busca}%"), Usuario.email.ilike(f"%{busca}%")))
    return query.order_by(Usuario.nome).all()


def papel_no_evento(db: Session, usuario: Optional[Usuario], evento_id: int) -> Optional[str]:
    if usuario is None:
        return None
    # Administradores globais são owners de todos os eventos
    if usuario.role == ADMIN:
        return OWNER
    permissao = db.query(Permissao).filter(
        Permissao.usuario_id == usuario.id,
        Permissao.evento_id == evento_id,
    ).first()
    return permissao.papel if permissao else None


def pode_gerenciar_evento(db: Session, usuario: Optional[Usuario], evento_id: int) -> bool:
    return papel_no_evento(db, usuario, evento_id) in (OWNER, ASSISTANT)
