# -*- coding: utf-8 -*-
"""
Cadastro de escolas e vínculo escola <-> eventos.

Uma escola é identificada pelo INEP. Quando ela se cadastra de novo para outro
evento, o cadastro existente recebe o novo evento em vez de gerar uma segunda
linha. Repetir o cadastro para o mesmo evento é rejeitado antes de qualquer
escrita.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.escola import Escola
from jogos_escolares.models.evento import Evento
from jogos_escolares.models.usuario import Usuario, SCHOOL_ADMIN
from jogos_escolares.services.ciclo_evento import obter_evento, evento_editavel, garantir_evento_editavel


@dataclass
class ResultadoCadastro:
    escola: Escola
    usuario: Usuario
    mesclada: bool


def normalizar_inep(inep: str) -> str:
    return re.sub(r"[^0-9]", "", inep or "")


def eventos_da_escola(escola: Escola) -> Set[int]:
    """Eventos vinculados, incluindo o campo legado evento_id."""
    return set(escola.evento_ids)


def buscar_por_inep(db: Session, inep: str, bloquear: bool = False) -> Optional[Escola]:
    query = db.query(Escola).filter(Escola.inep == normalizar_inep(inep))
    if bloquear:
        query = query.with_for_update()
    return query.first()


def inep_registrado_no_evento(db: Session, inep: str, evento_id: int) -> bool:
    escola = buscar_por_inep(db, inep)
    return escola is not None and evento_id in eventos_da_escola(escola)


def validar_inep_para_evento(db: Session, inep: str, evento_id: int) -> None:
    """
    Verificação feita antes de sair da etapa de dados institucionais: a mesma escola
    pode participar de vários eventos, mas só uma vez em cada.
    """
    if not normalizar_inep(inep):
        raise ValidationError("INEP é obrigatório.")
    if inep_registrado_no_evento(db, inep, evento_id):
        logging.warning(f"INEP {inep} já cadastrado no evento {evento_id}")
        raise ValidationError("Esta escola (INEP) já está cadastrada neste evento.")


def _gravar_cadastro(db: Session, dados_escola: dict, dados_usuario: dict, evento: Evento) -> ResultadoCadastro:
    inep = normalizar_inep(dados_escola["inep"])
    escola = buscar_por_inep(db, inep, bloquear=True)
    mesclada = escola is not None

    if mesclada:
        if evento.id in eventos_da_escola(escola):
            # Libera o lock da linha antes de recusar
            db.rollback()
            raise ValidationError("Esta escola (INEP) já está cadastrada neste evento.")
        ids = eventos_da_escola(escola) | {evento.id}
        escola.eventos = db.query(Evento).filter(Evento.id.in_(ids)).all()
    else:
        escola = Escola(**{**dados_escola, "inep": inep})
        escola.eventos = [evento]
        db.add(escola)
    # Garante o id definitivo da escola antes de criar o usuário
    db.flush()

    usuario = Usuario(
        email=dados_usuario["email"],
        nome=dados_usuario.get("nome") or dados_escola.get("nome_responsavel") or dados_escola.get("nome_diretor"),
        hashed_password=auth.get_password_hash(dados_usuario["password"]),
        telefone=dados_usuario.get("telefone"),
        cpf=dados_usuario.get("cpf"),
        role=SCHOOL_ADMIN,
        escola_id=escola.id,
    )
    db.add(usuario)
    db.flush()

    if not mesclada:
        escola.responsavel_id = usuario.id

    db.commit()
    db.refresh(escola)
    db.refresh(usuario)
    return ResultadoCadastro(escola=escola, usuario=usuario, mesclada=mesclada)


def cadastrar_escola(db: Session, dados_escola: dict, dados_usuario: dict, evento_id: int) -> ResultadoCadastro:
    """
    Autocadastro de uma escola para um evento, criando o usuário responsável (school_admin).

    Se o INEP já existe (escola inscrita em outro evento), os eventos são unidos no
    cadastro existente e o novo usuário aponta para essa escola.
    """
    evento = garantir_evento_editavel(db, evento_id)
    validar_inep_para_evento(db, dados_escola.get("inep"), evento_id)

    if auth.get_user(db, email=dados_usuario["email"]):
        raise ValidationError("Este email já está cadastrado no sistema.")

    try:
        resultado = _gravar_cadastro(db, dados_escola, dados_usuario, evento)
    except IntegrityError as e:
        db.rollback()
        # O texto do erro traz o SQL inteiro; a causa é decidida relendo o banco
        if auth.get_user(db, email=dados_usuario["email"]):
            raise ValidationError("Este email já está cadastrado no sistema.")
        # Outro cadastro com o mesmo INEP foi gravado primeiro: refaz a busca e cai na mesclagem
        logging.warning(f"Conflito de INEP {dados_escola.get('inep')} durante cadastro, repetindo como mesclagem: {e}")
        evento = obter_evento(db, evento_id)
        try:
            resultado = _gravar_cadastro(db, dados_escola, dados_usuario, evento)
        except IntegrityError as e2:
            db.rollback()
            logging.error(f"Erro de integridade ao cadastrar escola: {e2}")
            raise ValidationError("Não foi possível concluir o cadastro da escola.")

    if resultado.mesclada:
        logging.info(
            f"Escola {resultado.escola.id} (INEP {resultado.escola.inep}) vinculada ao evento {evento_id} "
            f"por mesclagem; usuário {resultado.usuario.id} associado ao cadastro existente"
        )
    else:
        logging.info(f"Escola {resultado.escola.id} (INEP {resultado.escola.inep}) criada para o evento {evento_id}")
    return resultado


def obter_escola(db: Session, escola_id: int) -> Escola:
    db_escola = db.query(Escola).filter(Escola.id == escola_id).first()
    if db_escola is None:
        raise NotFoundError("Escola não encontrada")
    return db_escola


def escola_do_usuario(db: Session, usuario: Usuario) -> Escola:
    if usuario.escola_id is None:
        raise NotFoundError("Nenhuma escola vinculada a este usuário.")
    return obter_escola(db, usuario.escola_id)


def listar_escolas(db: Session, evento_id: Optional[int] = None, busca: Optional[str] = None) -> List[Escola]:
    query = db.query(Escola)
    if busca:
        query = query.filter(
            or_(Escola.nome.ilike(f"%{busca}%"), Escola.inep.ilike(f"%{busca}%"), Escola.municipio.ilike(f"%{busca}%"))
        )
    escolas = query.order_by(Escola.nome).all()
    if evento_id is not None:
        escolas = [e for e in escolas if evento_id in eventos_da_escola(e)]
    return escolas


def atualizar_escola(db: Session, escola_id: int, dados: dict) -> Escola:
    db_escola = obter_escola(db, escola_id)
    if "inep" in dados:
        dados = {**dados, "inep": normalizar_inep(dados["inep"])}
        if not dados["inep"]:
            raise ValidationError("INEP é obrigatório.")
        outra = buscar_por_inep(db, dados["inep"])
        if outra is not None and outra.id != escola_id:
            raise ValidationError("Já existe uma escola cadastrada com este INEP.")

    for key, value in dados.items():
        setattr(db_escola, key, value)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Erro de integridade ao atualizar escola {escola_id}: {e}")
        raise ValidationError("Já existe uma escola cadastrada com este INEP.")
    db.refresh(db_escola)
    return db_escola


def vincular_eventos(db: Session, escola_id: int, evento_ids: Iterable[int]) -> Escola:
    """Substitui o conjunto de eventos da escola. Eventos novos no conjunto precisam estar editáveis."""
    db_escola = obter_escola(db, escola_id)
    atuais = eventos_da_escola(db_escola)
    novos_ids = set(evento_ids)

    eventos = []
    for evento_id in novos_ids:
        evento = obter_evento(db, evento_id)
        if evento_id not in atuais and not evento_editavel(evento):
            raise ValidationError(f"O evento '{evento.nome}' não aceita novas escolas.")
        eventos.append(evento)

    db_escola.eventos = eventos
    # O conjunto passa a ser a única fonte; o campo legado deixa de valer
    db_escola.evento_id = None
    db.commit()
    db.refresh(db_escola)
    return db_escola
