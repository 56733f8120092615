# -*- coding: utf-8 -*-
"""
Catálogo global de modalidades e associação com eventos.
"""
from typing import Iterable, List

from sqlalchemy.orm import Session

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.inscricao import Inscricao
from jogos_escolares.models.modalidade import Modalidade
from jogos_escolares.services.ciclo_evento import obter_evento

TIPOS = ("individual", "coletiva")
GENEROS = ("masculino", "feminino", "misto")


def _normalizar(dados: dict) -> dict:
    dados = dict(dados)
    if "tipo" in dados:
        dados["tipo"] = dados["tipo"].lower()
        if dados["tipo"] not in TIPOS:
            raise ValidationError(f"Tipo de modalidade inválido: {dados['tipo']}")
    if "genero" in dados:
        dados["genero"] = dados["genero"].lower()
        if dados["genero"] not in GENEROS:
            raise ValidationError(f"Gênero inválido: {dados['genero']}")
    return dados


def _validar_faixa(modalidade: Modalidade) -> None:
    if modalidade.idade_minima > modalidade.idade_maxima:
        raise ValidationError("A idade mínima não pode ser maior que a idade máxima.")


def criar_modalidade(db: Session, dados: dict) -> Modalidade:
    db_modalidade = Modalidade(**_normalizar(dados))
    _validar_faixa(db_modalidade)
    db.add(db_modalidade)
    db.commit()
    db.refresh(db_modalidade)
    return db_modalidade


def obter_modalidade(db: Session, modalidade_id: int) -> Modalidade:
    db_modalidade = db.query(Modalidade).filter(Modalidade.id == modalidade_id).first()
    if db_modalidade is None:
        raise NotFoundError("Modalidade não encontrada")
    return db_modalidade


def listar_modalidades(db: Session) -> List[Modalidade]:
    return db.query(Modalidade).order_by(Modalidade.nome, Modalidade.idade_minima).all()


def atualizar_modalidade(db: Session, modalidade_id: int, dados: dict) -> Modalidade:
    db_modalidade = obter_modalidade(db, modalidade_id)
    for key, value in _normalizar(dados).items():
        setattr(db_modalidade, key, value)
    if db_modalidade.idade_minima > db_modalidade.idade_maxima:
        db.rollback()
        raise ValidationError("A idade mínima não pode ser maior que a idade máxima.")
    db.commit()
    db.refresh(db_modalidade)
    return db_modalidade


def excluir_modalidade(db: Session, modalidade_id: int) -> None:
    db_modalidade = obter_modalidade(db, modalidade_id)
    if db.query(Inscricao).filter(Inscricao.modalidade_id == modalidade_id).first():
        raise ValidationError("Modalidade possui inscrições e não pode ser excluída.")
    db.delete(db_modalidade)
    db.commit()


def ids_modalidades_evento(db: Session, evento_id: int) -> List[int]:
    return [m.id for m in obter_evento(db, evento_id).modalidades]


def definir_modalidades_evento(db: Session, evento_id: int, modalidade_ids: Iterable[int]) -> List[Modalidade]:
    """Substitui a lista de modalidades do evento. Lista vazia libera todo o catálogo."""
    db_evento = obter_evento(db, evento_id)
    modalidades = [obter_modalidade(db, modalidade_id) for modalidade_id in set(modalidade_ids)]
    db_evento.modalidades = modalidades
    db.commit()
    db.refresh(db_evento)
    return db_evento.modalidades
