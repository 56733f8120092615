# jogos_escolares/routes/inscricoes_fastapi.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jogos_escolares import auth
from jogos_escolares.database import get_db
from jogos_escolares.models.inscricao import Inscricao
from jogos_escolares.models.usuario import Usuario
from jogos_escolares.exceptions import NotFoundError
from jogos_escolares.routes.escolas_fastapi import exigir_acesso_escola
from jogos_escolares.schemas.inscricao import InscricaoCreate, InscricaoRead
from jogos_escolares.services import inscricoes as inscricoes_service
from jogos_escolares.services import participantes as participantes_service

router = APIRouter(
    tags=["Inscrições"],
)

@router.post("", response_model=InscricaoRead, status_code=status.HTTP_201_CREATED)
def create_inscricao(inscricao: InscricaoCreate, db: Session = Depends(get_db),
                     current_user: Usuario = Depends(auth.get_current_active_user)):
    participante = participantes_service.obter_participante(db, inscricao.atleta_id)
    exigir_acesso_escola(current_user, participante.escola_id)
    return inscricoes_service.criar_inscricao(
        db, inscricao.atleta_id, inscricao.evento_id, inscricao.modalidade_id, inscricao.escola_id
    )

@router.get("", response_model=List[InscricaoRead])
def read_inscricoes(participante_id: int, evento_id: int, db: Session = Depends(get_db),
                    current_user: Usuario = Depends(auth.get_current_active_user)):
    participante = participantes_service.obter_participante(db, participante_id)
    exigir_acesso_escola(current_user, participante.escola_id)
    return inscricoes_service.listar_inscricoes(db, participante_id, evento_id)

@router.delete("/{inscricao_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inscricao(inscricao_id: int, db: Session = Depends(get_db),
                     current_user: Usuario = Depends(auth.get_current_active_user)):
    db_inscricao = db.query(Inscricao).filter(Inscricao.id == inscricao_id).first()
    if db_inscricao is None:
        raise NotFoundError("Inscrição não encontrada")
    exigir_acesso_escola(current_user, db_inscricao.escola_id)
    inscricoes_service.excluir_inscricao(db, inscricao_id)
    return None
