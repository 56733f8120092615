# jogos_escolares/routes/eventos_fastapi.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.database import get_db
from jogos_escolares.models.evento import Evento
from jogos_escolares.models.usuario import Usuario
from jogos_escolares.schemas.evento import (EventoCreate, EventoRead, EventoUpdate, EventoStatusUpdate,
                                            EventoModalidadesUpdate)
from jogos_escolares.schemas.modalidade import ModalidadeRead
from jogos_escolares.schemas.permissao import MembroCreate, MembroRead, MembroUpdate
from jogos_escolares.schemas.usuario import UsuarioRead
from jogos_escolares.services import ciclo_evento, equipe, modalidades as modalidades_service

router = APIRouter(
    tags=["Eventos"],
    responses={404: {"description": "Evento não encontrado"}},
)


def montar_evento_read(db: Session, db_evento: Evento, usuario: Optional[Usuario] = None) -> EventoRead:
    """Serializa o evento com os status calculados no momento da leitura."""
    evento = EventoRead.from_orm(db_evento)
    evento.status_tempo = ciclo_evento.status_do_evento(db_evento).value
    evento.editavel = ciclo_evento.evento_editavel(db_evento)
    evento.inscricoes_individuais_abertas = ciclo_evento.inscricoes_abertas(
        db_evento.inscricao_individual_inicio, db_evento.inscricao_individual_fim)
    evento.inscricoes_coletivas_abertas = ciclo_evento.inscricoes_abertas(
        db_evento.inscricao_coletiva_inicio, db_evento.inscricao_coletiva_fim)
    evento.meu_papel = equipe.papel_no_evento(db, usuario, db_evento.id)
    return evento


def exigir_gestor(db: Session, usuario: Usuario, evento_id: int) -> None:
    ciclo_evento.obter_evento(db, evento_id)
    if not equipe.pode_gerenciar_evento(db, usuario, evento_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="Apenas o proprietário ou assistentes podem alterar este evento.")


def exigir_membro(db: Session, usuario: Usuario, evento_id: int) -> None:
    ciclo_evento.obter_evento(db, evento_id)
    if equipe.papel_no_evento(db, usuario, evento_id) is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Você não faz parte da equipe deste evento.")


# --- CRUD Endpoints ---

@router.post("", response_model=EventoRead, status_code=status.HTTP_201_CREATED)
def create_evento(evento: EventoCreate, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    """
    Cria um evento. O criador vira o proprietário (owner) do evento.
    """
    db_evento = ciclo_evento.criar_evento(db, evento.dict(), current_user)
    return montar_evento_read(db, db_evento, current_user)

@router.get("", response_model=List[EventoRead])
def read_eventos(status_admin: Optional[str] = None, db: Session = Depends(get_db),
                 current_user: Usuario = Depends(auth.get_current_active_user)):
    query = db.query(Evento)
    if status_admin:
        query = query.filter(Evento.status_admin == ciclo_evento.normalizar_status_admin(status_admin).value)
    eventos = query.order_by(Evento.data_inicio.desc()).all()
    return [montar_evento_read(db, e, current_user) for e in eventos]

@router.get("/{evento_id}", response_model=EventoRead)
def read_evento(evento_id: int, db: Session = Depends(get_db),
                current_user: Usuario = Depends(auth.get_current_active_user)):
    return montar_evento_read(db, ciclo_evento.obter_evento(db, evento_id), current_user)

@router.put("/{evento_id}", response_model=EventoRead)
def update_evento(evento_id: int, evento: EventoUpdate, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    db_evento = ciclo_evento.atualizar_evento(db, evento_id, evento.dict(exclude_unset=True))
    return montar_evento_read(db, db_evento, current_user)

@router.post("/{evento_id}/status", response_model=EventoRead)
def alterar_status(evento_id: int, dados: EventoStatusUpdate, db: Session = Depends(get_db),
                   current_user: Usuario = Depends(auth.get_current_active_user)):
    """
    Publica, suspende, cancela ou reabre o evento.
    """
    exigir_gestor(db, current_user, evento_id)
    db_evento = ciclo_evento.alterar_status_admin(db, evento_id, dados.status_admin)
    return montar_evento_read(db, db_evento, current_user)


# --- Modalidades do evento ---

@router.get("/{evento_id}/modalidades", response_model=List[ModalidadeRead])
def read_modalidades_evento(evento_id: int, db: Session = Depends(get_db),
                            current_user: Usuario = Depends(auth.get_current_active_user)):
    return ciclo_evento.obter_evento(db, evento_id).modalidades

@router.put("/{evento_id}/modalidades", response_model=List[ModalidadeRead])
def update_modalidades_evento(evento_id: int, dados: EventoModalidadesUpdate, db: Session = Depends(get_db),
                              current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    ciclo_evento.garantir_evento_editavel(db, evento_id)
    return modalidades_service.definir_modalidades_evento(db, evento_id, dados.modalidade_ids)


# --- Equipe do evento ---

@router.get("/{evento_id}/equipe", response_model=List[MembroRead])
def read_equipe(evento_id: int, db: Session = Depends(get_db),
                current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_membro(db, current_user, evento_id)
    return equipe.listar_equipe(db, evento_id)

@router.get("/{evento_id}/equipe/candidatos", response_model=List[UsuarioRead])
def read_candidatos(evento_id: int, busca: Optional[str] = None, db: Session = Depends(get_db),
                    current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    return equipe.listar_candidatos(db, evento_id, busca)

@router.post("/{evento_id}/equipe", response_model=MembroRead, status_code=status.HTTP_201_CREATED)
def add_membro(evento_id: int, membro: MembroCreate, db: Session = Depends(get_db),
               current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    ciclo_evento.garantir_evento_editavel(db, evento_id)
    return equipe.adicionar_membro(db, membro.usuario_id, evento_id, membro.papel)

@router.put("/{evento_id}/equipe/{usuario_id}", response_model=MembroRead)
def update_membro(evento_id: int, usuario_id: int, membro: MembroUpdate, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    ciclo_evento.garantir_evento_editavel(db, evento_id)
    return equipe.atualizar_papel(db, usuario_id, evento_id, membro.papel)

@router.delete("/{evento_id}/equipe/{usuario_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_membro(evento_id: int, usuario_id: int, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_gestor(db, current_user, evento_id)
    ciclo_evento.garantir_evento_editavel(db, evento_id)
    equipe.remover_membro(db, usuario_id, evento_id)
    return None
