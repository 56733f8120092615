# -*- coding: utf-8 -*-
"""
Técnicos vinculados a uma escola e as modalidades que cada um pode gerenciar.

As modalidades permitidas são as associadas aos eventos da escola, contando o
campo legado evento_id.
"""
import logging
from typing import Iterable, List, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.evento import Evento
from jogos_escolares.models.modalidade import Modalidade
from jogos_escolares.models.usuario import Usuario
from jogos_escolares.models.vinculo_tecnico import VinculoTecnico
from jogos_escolares.services.cadastro_escola import obter_escola, eventos_da_escola

MENSAGEM_JA_VINCULADO = "Usuário já é técnico desta escola."


def modalidades_permitidas(db: Session, escola_id: int) -> Set[int]:
    escola = obter_escola(db, escola_id)
    ids_eventos = eventos_da_escola(escola)
    if not ids_eventos:
        raise ValidationError("A escola não possui eventos vinculados para atribuir modalidades.")
    eventos = db.query(Evento).filter(Evento.id.in_(ids_eventos)).all()
    return {m.id for evento in eventos for m in evento.modalidades}


def validar_modalidades(db: Session, escola_id: int, modalidade_ids: Iterable[int]) -> List[Modalidade]:
    ids = set(modalidade_ids or [])
    if not ids:
        return []
    invalidas = sorted(ids - modalidades_permitidas(db, escola_id))
    if invalidas:
        raise ValidationError(
            "As seguintes modalidades não são permitidas para esta escola "
            f"(não vinculadas aos eventos da escola): {', '.join(str(i) for i in invalidas)}"
        )
    return db.query(Modalidade).filter(Modalidade.id.in_(ids)).all()


def listar_tecnicos(db: Session, escola_id: int) -> List[VinculoTecnico]:
    obter_escola(db, escola_id)
    return db.query(VinculoTecnico).options(joinedload(VinculoTecnico.usuario)).filter(
        VinculoTecnico.escola_id == escola_id
    ).order_by(VinculoTecnico.id).all()


def obter_vinculo(db: Session, vinculo_id: int) -> VinculoTecnico:
    vinculo = db.query(VinculoTecnico).filter(VinculoTecnico.id == vinculo_id).first()
    if vinculo is None:
        raise NotFoundError("Vínculo não encontrado")
    return vinculo


def adicionar_tecnico(db: Session, escola_id: int, usuario_id: int, modalidade_ids: Iterable[int]) -> VinculoTecnico:
    modalidades = validar_modalidades(db, escola_id, modalidade_ids)
    if db.query(Usuario).filter(Usuario.id == usuario_id).first() is None:
        raise NotFoundError("Usuário não encontrado")

    existente = db.query(VinculoTecnico).filter(
        VinculoTecnico.escola_id == escola_id,
        VinculoTecnico.usuario_id == usuario_id,
    ).first()
    if existente:
        raise ValidationError(MENSAGEM_JA_VINCULADO)

    vinculo = VinculoTecnico(escola_id=escola_id, usuario_id=usuario_id, modalidades=modalidades)
    db.add(vinculo)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.warning(f"Vínculo de técnico duplicado barrado pela restrição única: {e}")
        raise ValidationError(MENSAGEM_JA_VINCULADO)
    db.refresh(vinculo)
    logging.info(f"Usuário {usuario_id} vinculado como técnico da escola {escola_id}")
    return vinculo


def atualizar_modalidades(db: Session, vinculo_id: int, modalidade_ids: Iterable[int]) -> VinculoTecnico:
    vinculo = obter_vinculo(db, vinculo_id)
    vinculo.modalidades = validar_modalidades(db, vinculo.escola_id, modalidade_ids)
    db.commit()
    db.refresh(vinculo)
    return vinculo


def remover_tecnico(db: Session, vinculo_id: int) -> None:
    vinculo = obter_vinculo(db, vinculo_id)
    db.delete(vinculo)
    db.commit()
