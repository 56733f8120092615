# -*- coding: utf-8 -*-
"""
Inscrições de atletas e técnicos em modalidades de um evento.

Um participante só pode ter uma inscrição por (evento, modalidade). A regra é
verificada antes da escrita e garantida pela restrição única da tabela.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.inscricao import Inscricao
from jogos_escolares.models.modalidade import Modalidade
from jogos_escolares.models.participante import Participante
from jogos_escolares.services.ciclo_evento import obter_evento

MENSAGEM_DUPLICADA = "Participante já inscrito nesta modalidade para este evento."


def _inscricao_existente(db: Session, participante_id: int, evento_id: int, modalidade_id: int):
    return db.query(Inscricao).filter(
        Inscricao.atleta_id == participante_id,
        Inscricao.evento_id == evento_id,
        Inscricao.modalidade_id == modalidade_id,
    ).first()


def criar_inscricao(db: Session, participante_id: int, evento_id: int, modalidade_id: int,
                    escola_id: Optional[int] = None) -> Inscricao:
    participante = db.query(Participante).filter(Participante.id == participante_id).first()
    if participante is None:
        raise NotFoundError("Participante não encontrado")
    obter_evento(db, evento_id)
    if db.query(Modalidade).filter(Modalidade.id == modalidade_id).first() is None:
        raise NotFoundError("Modalidade não encontrada")
    # A inscrição pertence sempre à escola do participante
    if escola_id is not None and escola_id != participante.escola_id:
        raise ValidationError("A escola informada não é a escola do participante.")

    if _inscricao_existente(db, participante_id, evento_id, modalidade_id):
        logging.warning(f"Inscrição duplicada rejeitada: participante {participante_id}, evento {evento_id}, modalidade {modalidade_id}")
        raise ValidationError(MENSAGEM_DUPLICADA)

    db_inscricao = Inscricao(
        atleta_id=participante_id,
        evento_id=evento_id,
        modalidade_id=modalidade_id,
        escola_id=participante.escola_id,
    )
    db.add(db_inscricao)
    try:
        db.commit()
    except IntegrityError as e:
        # Outra requisição gravou a mesma inscrição entre a verificação e o commit
        db.rollback()
        logging.warning(f"Inscrição duplicada barrada pela restrição única: {e}")
        raise ValidationError(MENSAGEM_DUPLICADA)
    db.refresh(db_inscricao)
    return db_inscricao


def excluir_inscricao(db: Session, inscricao_id: int) -> None:
    db_inscricao = db.query(Inscricao).filter(Inscricao.id == inscricao_id).first()
    if db_inscricao is None:
        raise NotFoundError("Inscrição não encontrada")
    db.delete(db_inscricao)
    db.commit()


def listar_inscricoes(db: Session, participante_id: int, evento_id: int) -> List[Inscricao]:
    return db.query(Inscricao).options(joinedload(Inscricao.modalidade)).filter(
        Inscricao.atleta_id == participante_id,
        Inscricao.evento_id == evento_id,
    ).order_by(Inscricao.id).all()
