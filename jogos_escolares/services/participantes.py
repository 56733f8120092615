# -*- coding: utf-8 -*-
"""
Atletas e técnicos das escolas.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.inscricao import Inscricao
from jogos_escolares.models.participante import Participante, ATLETA, TECNICO
from jogos_escolares.services.cadastro_escola import obter_escola

SEXOS = ("Masculino", "Feminino")


def _validar(dados: dict) -> None:
    if "tipo" in dados and dados["tipo"] not in (ATLETA, TECNICO):
        raise ValidationError(f"Tipo de participante inválido: {dados['tipo']}")
    if "sexo" in dados and dados["sexo"] not in SEXOS:
        raise ValidationError(f"Sexo inválido: {dados['sexo']}")


def criar_participante(db: Session, escola_id: int, dados: dict) -> Participante:
    obter_escola(db, escola_id)
    _validar(dados)
    db_participante = Participante(**dados, escola_id=escola_id)
    db.add(db_participante)
    db.commit()
    db.refresh(db_participante)
    return db_participante


def obter_participante(db: Session, participante_id: int) -> Participante:
    db_participante = db.query(Participante).filter(Participante.id == participante_id).first()
    if db_participante is None:
        raise NotFoundError("Participante não encontrado")
    return db_participante


def listar_participantes(db: Session, escola_id: int, tipo: Optional[str] = None) -> List[Participante]:
    query = db.query(Participante).filter(Participante.escola_id == escola_id)
    if tipo:
        query = query.filter(Participante.tipo == tipo)
    return query.order_by(Participante.nome).all()


def atualizar_participante(db: Session, participante_id: int, dados: dict) -> Participante:
    db_participante = obter_participante(db, participante_id)
    _validar(dados)
    for key, value in dados.items():
        setattr(db_participante, key, value)
    db.commit()
    db.refresh(db_participante)
    return db_participante


def excluir_participante(db: Session, participante_id: int) -> None:
    db_participante = obter_participante(db, participante_id)
    if db.query(Inscricao).filter(Inscricao.atleta_id == participante_id).first():
        raise ValidationError("Participante possui inscrições. Exclua as inscrições antes.")
    db.delete(db_participante)
    db.commit()
