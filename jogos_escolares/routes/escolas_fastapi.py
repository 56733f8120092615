# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o cadastro de Escolas, o vínculo com eventos e os técnicos da escola.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.database import get_db
from jogos_escolares.models.usuario import Usuario, ADMIN, PRODUCER
from jogos_escolares.schemas.escola import (EscolaCadastro, EscolaRead, EscolaUpdate, EscolaEventosUpdate,
                                            VerificacaoInep, CadastroResultado)
from jogos_escolares.schemas.usuario import UsuarioRead
from jogos_escolares.schemas.vinculo_tecnico import VinculoTecnicoCreate, VinculoTecnicoRead, VinculoTecnicoUpdate
from jogos_escolares.services import cadastro_escola, ciclo_evento, vinculos_tecnicos

router = APIRouter(
    tags=["Escolas"],
    responses={404: {"description": "Escola não encontrada"}},
)


def exigir_acesso_escola(usuario: Usuario, escola_id: int) -> None:
    """Produtores e admins veem todas as escolas; os demais só a própria."""
    if usuario.role in (ADMIN, PRODUCER):
        return
    if usuario.escola_id != escola_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Acesso negado a esta escola.")


# --- Autocadastro (público) ---

@router.post("/cadastro/verificar-inep")
def verificar_inep(dados: VerificacaoInep, db: Session = Depends(get_db)):
    """
    Etapa de dados institucionais: a escola não pode estar cadastrada no mesmo evento.
    """
    ciclo_evento.garantir_evento_editavel(db, dados.evento_id)
    cadastro_escola.validar_inep_para_evento(db, dados.inep, dados.evento_id)
    return {"disponivel": True}

@router.post("/cadastro", response_model=CadastroResultado, status_code=status.HTTP_201_CREATED)
def cadastrar_escola(dados: EscolaCadastro, db: Session = Depends(get_db)):
    """
    Cadastra a escola no evento e cria o usuário responsável.
    Se o INEP já existir em outro evento, o cadastro existente é reaproveitado.
    """
    resultado = cadastro_escola.cadastrar_escola(db, dados.escola.dict(), dados.responsavel.dict(), dados.evento_id)
    return {
        "escola": EscolaRead.from_orm(resultado.escola),
        "usuario": UsuarioRead.from_orm(resultado.usuario),
        "mesclada": resultado.mesclada,
        "access_token": auth.token_para_usuario(resultado.usuario),
        "token_type": "bearer",
    }


# --- Consulta e manutenção ---

@router.get("", response_model=List[EscolaRead])
def read_escolas(evento_id: Optional[int] = None, busca: Optional[str] = None, db: Session = Depends(get_db),
                 current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    return cadastro_escola.listar_escolas(db, evento_id=evento_id, busca=busca)

@router.get("/minha", response_model=EscolaRead)
def read_minha_escola(db: Session = Depends(get_db), current_user: Usuario = Depends(auth.get_current_active_user)):
    return cadastro_escola.escola_do_usuario(db, current_user)

@router.get("/{escola_id}", response_model=EscolaRead)
def read_escola(escola_id: int, db: Session = Depends(get_db),
                current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_acesso_escola(current_user, escola_id)
    return cadastro_escola.obter_escola(db, escola_id)

@router.put("/{escola_id}", response_model=EscolaRead)
def update_escola(escola_id: int, escola: EscolaUpdate, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_acesso_escola(current_user, escola_id)
    return cadastro_escola.atualizar_escola(db, escola_id, escola.dict(exclude_unset=True))

@router.put("/{escola_id}/eventos", response_model=EscolaRead)
def vincular_eventos(escola_id: int, dados: EscolaEventosUpdate, db: Session = Depends(get_db),
                     current_user: Usuario = Depends(auth.get_produtor_ou_admin)):
    """
    Define os eventos dos quais a escola participa.
    """
    return cadastro_escola.vincular_eventos(db, escola_id, dados.evento_ids)


# --- Técnicos da escola ---

def _vinculo_da_escola(db: Session, escola_id: int, vinculo_id: int):
    vinculo = vinculos_tecnicos.obter_vinculo(db, vinculo_id)
    if vinculo.escola_id != escola_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vínculo não encontrado")
    return vinculo

@router.get("/{escola_id}/tecnicos", response_model=List[VinculoTecnicoRead])
def read_tecnicos(escola_id: int, db: Session = Depends(get_db),
                  current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_acesso_escola(current_user, escola_id)
    return vinculos_tecnicos.listar_tecnicos(db, escola_id)

@router.post("/{escola_id}/tecnicos", response_model=VinculoTecnicoRead, status_code=status.HTTP_201_CREATED)
def add_tecnico(escola_id: int, dados: VinculoTecnicoCreate, db: Session = Depends(get_db),
                current_user: Usuario = Depends(auth.get_current_active_user)):
    """
    Vincula um usuário como técnico da escola, limitado às modalidades dos eventos da escola.
    """
    exigir_acesso_escola(current_user, escola_id)
    return vinculos_tecnicos.adicionar_tecnico(db, escola_id, dados.usuario_id, dados.modalidade_ids)

@router.put("/{escola_id}/tecnicos/{vinculo_id}", response_model=VinculoTecnicoRead)
def update_tecnico(escola_id: int, vinculo_id: int, dados: VinculoTecnicoUpdate, db: Session = Depends(get_db),
                   current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_acesso_escola(current_user, escola_id)
    _vinculo_da_escola(db, escola_id, vinculo_id)
    return vinculos_tecnicos.atualizar_modalidades(db, vinculo_id, dados.modalidade_ids)

@router.delete("/{escola_id}/tecnicos/{vinculo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tecnico(escola_id: int, vinculo_id: int, db: Session = Depends(get_db),
                   current_user: Usuario = Depends(auth.get_current_active_user)):
    exigir_acesso_escola(current_user, escola_id)
    _vinculo_da_escola(db, escola_id, vinculo_id)
    vinculos_tecnicos.remover_tecnico(db, vinculo_id)
    return None
