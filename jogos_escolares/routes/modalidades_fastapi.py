# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD do catálogo de Modalidades.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.database import get_db
from jogos_escolares.models.usuario import Usuario
from jogos_escolares.schemas.modalidade import ModalidadeCreate, ModalidadeRead, ModalidadeUpdate
from jogos_escolares.services import modalidades as modalidades_service

router = APIRouter(
    tags=["Modalidades"],
    responses={404: {"description": "Modalidade não encontrada"}},
)

@router.post("", response_model=ModalidadeRead, status_code=status.HTTP_201_CREATED)
def create_modalidade(modalidade: ModalidadeCreate, db: Session = Depends(get_db),
                      current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    return modalidades_service.criar_modalidade(db, modalidade.dict())

@router.get("", response_model=List[ModalidadeRead])
def read_modalidades(db: Session = Depends(get_db), current_user: Usuario = Depends(auth.get_current_active_user)):
    return modalidades_service.listar_modalidades(db)

@router.get("/{modalidade_id}", response_model=ModalidadeRead)
def read_modalidade(modalidade_id: int, db: Session = Depends(get_db),
                    current_user: Usuario = Depends(auth.get_current_active_user)):
    return modalidades_service.obter_modalidade(db, modalidade_id)

@router.put("/{modalidade_id}", response_model=ModalidadeRead)
def update_modalidade(modalidade_id: int, modalidade: ModalidadeUpdate, db: Session = Depends(get_db),
                      current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    return modalidades_service.atualizar_modalidade(db, modalidade_id, modalidade.dict(exclude_unset=True))

@router.delete("/{modalidade_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_modalidade(modalidade_id: int, db: Session = Depends(get_db),
                      current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    modalidades_service.excluir_modalidade(db, modalidade_id)
    return None
