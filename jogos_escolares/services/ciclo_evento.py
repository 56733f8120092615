# -*- coding: utf-8 -*-
"""
Ciclo de vida do evento: status administrativo (manual) e status de tempo (automático).

O status de tempo nunca é salvo no banco; ele é recalculado a cada leitura a partir
de (agora, data_inicio, data_fim). A editabilidade combina os dois e também é
recalculada sempre que uma ação de escrita depende dela.
"""
import enum
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.evento import Evento
from jogos_escolares.models.permissao import Permissao, OWNER
from jogos_escolares.models.usuario import Usuario, PRODUCER, ADMIN


class AdminStatus(str, enum.Enum):
    DRAFT = "RASCUNHO"
    PUBLISHED = "PUBLICADO"
    SUSPENDED = "SUSPENSO"
    CANCELLED = "CANCELADO"
    REOPENED = "REABERTO"


class TimeStatus(str, enum.Enum):
    SCHEDULED = "AGENDADO"
    ACTIVE = "EM_ANDAMENTO"
    CLOSED = "ENCERRADO"


STATUS_EDITAVEIS = {AdminStatus.DRAFT, AdminStatus.PUBLISHED, AdminStatus.REOPENED}

# Nomes antigos que ainda aparecem em cadastros
_ALIASES_STATUS = {"DESATIVADO": AdminStatus.CANCELLED}


def normalizar_status_admin(valor) -> AdminStatus:
    """Aceita o valor ('PUBLICADO'), o nome ('PUBLISHED') ou o enum, em qualquer caixa."""
    if isinstance(valor, AdminStatus):
        return valor
    if not valor:
        return AdminStatus.DRAFT
    texto = str(valor).strip().upper()
    if texto in _ALIASES_STATUS:
        return _ALIASES_STATUS[texto]
    for status in AdminStatus:
        if texto in (status.value, status.name):
            return status
    raise ValidationError(f"Status administrativo inválido: {valor}")


def calcular_status_tempo(agora: datetime, inicio: datetime, fim: datetime) -> TimeStatus:
    if agora < inicio:
        return TimeStatus.SCHEDULED
    if agora > fim:
        return TimeStatus.CLOSED
    return TimeStatus.ACTIVE


def normalizar_status_tempo(valor) -> TimeStatus:
    if isinstance(valor, TimeStatus):
        return valor
    texto = str(valor or "").strip().upper()
    for status in TimeStatus:
        if texto in (status.value, status.name):
            return status
    raise ValidationError(f"Status de tempo inválido: {valor}")


def is_editavel(status_admin, status_tempo) -> bool:
    """CANCELADO e SUSPENSO nunca são editáveis; os demais só enquanto o evento não encerrou."""
    status_admin = normalizar_status_admin(status_admin)
    return status_admin in STATUS_EDITAVEIS and normalizar_status_tempo(status_tempo) != TimeStatus.CLOSED


def status_do_evento(evento: Evento, agora: Optional[datetime] = None) -> TimeStatus:
    return calcular_status_tempo(agora or datetime.utcnow(), evento.data_inicio, evento.data_fim)


def evento_editavel(evento: Evento, agora: Optional[datetime] = None) -> bool:
    return is_editavel(evento.status_admin, status_do_evento(evento, agora))


def inscricoes_abertas(inicio: Optional[datetime], fim: Optional[datetime], agora: Optional[datetime] = None) -> bool:
    """Janela de inscrição com limites inclusivos. Sem datas definidas = fechada."""
    if inicio is None or fim is None:
        return False
    agora = agora or datetime.utcnow()
    return inicio <= agora <= fim


def obter_evento(db: Session, evento_id: int) -> Evento:
    db_evento = db.query(Evento).filter(Evento.id == evento_id).first()
    if db_evento is None:
        raise NotFoundError("Evento não encontrado")
    return db_evento


def garantir_evento_editavel(db: Session, evento_id: int, agora: Optional[datetime] = None) -> Evento:
    db_evento = obter_evento(db, evento_id)
    if not evento_editavel(db_evento, agora):
        raise ValidationError(
            f"O evento '{db_evento.nome}' não pode ser alterado (status {db_evento.status_admin}, "
            f"{status_do_evento(db_evento, agora).value})."
        )
    return db_evento


def criar_evento(db: Session, dados: dict, criador: Usuario) -> Evento:
    """
    Cria o evento e a permissão 'owner' do criador na mesma transação.
    """
    if criador.role not in (PRODUCER, ADMIN):
        raise ValidationError("Apenas produtores ou administradores podem criar eventos.")

    dados = dict(dados)
    if dados.get("data_fim") < dados.get("data_inicio"):
        raise ValidationError("A data de término deve ser posterior à data de início.")
    dados["status_admin"] = normalizar_status_admin(dados.get("status_admin")).value

    db_evento = Evento(**dados, criado_por_id=criador.id)
    db.add(db_evento)
    db.flush()
    db.add(Permissao(usuario_id=criador.id, evento_id=db_evento.id, papel=OWNER))
    db.commit()
    db.refresh(db_evento)
    logging.info(f"Evento {db_evento.id} criado por usuário {criador.id} (owner)")
    return db_evento


def atualizar_evento(db: Session, evento_id: int, dados: dict) -> Evento:
    db_evento = garantir_evento_editavel(db, evento_id)
    for key, value in dados.items():
        setattr(db_evento, key, value)
    if db_evento.data_fim < db_evento.data_inicio:
        db.rollback()
        raise ValidationError("A data de término deve ser posterior à data de início.")
    db.commit()
    db.refresh(db_evento)
    return db_evento


def alterar_status_admin(db: Session, evento_id: int, novo_status) -> Evento:
    """Transição manual de status. Evento cancelado não sai mais desse status."""
    db_evento = obter_evento(db, evento_id)
    novo = normalizar_status_admin(novo_status)
    atual = normalizar_status_admin(db_evento.status_admin)
    if atual == AdminStatus.CANCELLED and novo != AdminStatus.CANCELLED:
        raise ValidationError("Evento cancelado não pode mudar de status.")
    db_evento.status_admin = novo.value
    db.commit()
    db.refresh(db_evento)
    logging.info(f"Evento {evento_id}: status {atual.value} -> {novo.value}")
    return db_evento
