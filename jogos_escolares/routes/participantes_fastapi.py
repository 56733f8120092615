# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Atletas e Técnicos das escolas, incluindo a consulta de elegibilidade.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.database import get_db
from jogos_escolares.models.participante import Participante
from jogos_escolares.models.usuario import Usuario, ADMIN, PRODUCER
from jogos_escolares.routes.escolas_fastapi import exigir_acesso_escola
from jogos_escolares.schemas.modalidade import ProvaRead
from jogos_escolares.schemas.participante import ParticipanteCreate, ParticipanteRead, ParticipanteUpdate, FunilRead
from jogos_escolares.services import participantes as participantes_service
from jogos_escolares.services import elegibilidade

router = APIRouter(
    tags=["Participantes"],
    responses={404: {"description": "Participante não encontrado"}},
)


def montar_participante_read(db_participante: Participante) -> ParticipanteRead:
    participante = ParticipanteRead.from_orm(db_participante)
    participante.idade = elegibilidade.calcular_idade(db_participante.data_nascimento)
    return participante


def _participante_acessivel(db: Session, usuario: Usuario, participante_id: int) -> Participante:
    db_participante = participantes_service.obter_participante(db, participante_id)
    exigir_acesso_escola(usuario, db_participante.escola_id)
    return db_participante


@router.post("", response_model=ParticipanteRead, status_code=status.HTTP_201_CREATED)
def create_participante(participante: ParticipanteCreate, db: Session = Depends(get_db),
                        current_user: Usuario = Depends(auth.get_current_active_user)):
    """
    Cadastra um atleta ou técnico. Usuários de escola cadastram sempre na própria escola.
    """
    dados = participante.dict(exclude={"escola_id"})
    if current_user.role in (ADMIN, PRODUCER):
        escola_id = participante.escola_id
        if escola_id is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Informe a escola do participante.")
    else:
        escola_id = current_user.escola_id
        if escola_id is None:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuário sem escola vinculada.")
    return montar_participante_read(participantes_service.criar_participante(db, escola_id, dados))

@router.get("", response_model=List[ParticipanteRead])
def read_participantes(escola_id: Optional[int] = None, tipo: Optional[str] = None, db: Session = Depends(get_db),
                       current_user: Usuario = Depends(auth.get_current_active_user)):
    escola_id = escola_id or current_user.escola_id
    if escola_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Informe a escola.")
    exigir_acesso_escola(current_user, escola_id)
    return [montar_participante_read(p) for p in participantes_service.listar_participantes(db, escola_id, tipo)]

@router.get("/{participante_id}", response_model=ParticipanteRead)
def read_participante(participante_id: int, db: Session = Depends(get_db),
                      current_user: Usuario = Depends(auth.get_current_active_user)):
    return montar_participante_read(_participante_acessivel(db, current_user, participante_id))

@router.put("/{participante_id}", response_model=ParticipanteRead)
def update_participante(participante_id: int, participante: ParticipanteUpdate, db: Session = Depends(get_db),
                        current_user: Usuario = Depends(auth.get_current_active_user)):
    _participante_acessivel(db, current_user, participante_id)
    db_participante = participantes_service.atualizar_participante(
        db, participante_id, participante.dict(exclude_unset=True))
    return montar_participante_read(db_participante)

@router.delete("/{participante_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_participante(participante_id: int, db: Session = Depends(get_db),
                        current_user: Usuario = Depends(auth.get_current_active_user)):
    _participante_acessivel(db, current_user, participante_id)
    participantes_service.excluir_participante(db, participante_id)
    return None

@router.get("/{participante_id}/elegibilidade/{evento_id}", response_model=FunilRead)
def read_elegibilidade(participante_id: int, evento_id: int, tipo: Optional[str] = None, nome: Optional[str] = None,
                       db: Session = Depends(get_db), current_user: Usuario = Depends(auth.get_current_active_user)):
    """
    Opções de inscrição do participante no evento: tipos -> nomes (com tipo) -> provas (com tipo e nome).
    """
    _participante_acessivel(db, current_user, participante_id)
    funil = elegibilidade.montar_funil(db, participante_id, evento_id, tipo=tipo, nome=nome)
    provas = [
        ProvaRead(id=m.id, nome=m.nome, tipo=m.tipo, genero=m.genero, idade_minima=m.idade_minima,
                  idade_maxima=m.idade_maxima, prova=m.prova, rotulo=elegibilidade.rotulo_prova(m))
        for m in funil.provas
    ]
    return FunilRead(
        tipos=funil.tipos,
        nomes=funil.nomes,
        provas=provas,
        prova_selecionada_id=funil.prova_selecionada.id if funil.prova_selecionada else None,
    )
