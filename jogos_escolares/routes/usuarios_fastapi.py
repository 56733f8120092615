from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jogos_escolares import auth, database
from jogos_escolares.models.usuario import Usuario, ADMIN
from jogos_escolares.schemas import usuario as schemas_usuario
from jogos_escolares.services import usuarios as usuarios_service

router = APIRouter(
    prefix="/api/v1/usuarios",
    tags=["Usuarios"],
)

@router.post("", response_model=schemas_usuario.UsuarioRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user: schemas_usuario.UsuarioCreate,
    db: Session = Depends(database.get_db),
    current_user: Usuario = Depends(auth.get_current_active_user),
):
    """
    Cria um usuário. O papel permitido depende do papel de quem cria.
    """
    return usuarios_service.criar_usuario(db, current_user, user.dict())

@router.get("", response_model=List[schemas_usuario.UsuarioRead])
def read_users(skip: int = 0, limit: int = 100, db: Session = Depends(database.get_db),
               current_user: Usuario = Depends(auth.get_admin_user)):
    return db.query(Usuario).order_by(Usuario.id).offset(skip).limit(limit).all()

@router.get("/{user_id}", response_model=schemas_usuario.UsuarioRead)
def read_user(user_id: int, db: Session = Depends(database.get_db),
              current_user: Usuario = Depends(auth.get_current_active_user)):
    if current_user.role != ADMIN and current_user.id != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Acesso negado.")
    return usuarios_service.obter_usuario(db, user_id)

@router.put("/{user_id}", response_model=schemas_usuario.UsuarioRead)
def update_user(user_id: int, user: schemas_usuario.UsuarioUpdate, db: Session = Depends(database.get_db),
                current_user: Usuario = Depends(auth.get_current_active_user)):
    update_data = user.dict(exclude_unset=True)
    if current_user.role != ADMIN:
        if current_user.id != user_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Acesso negado.")
        # O próprio usuário não altera papel nem status
        if "role" in update_data or "ativo" in update_data:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Apenas administradores alteram papel ou status.")
    return usuarios_service.atualizar_usuario(db, user_id, update_data)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def deactivate_user(user_id: int, db: Session = Depends(database.get_db),
                    current_user: Usuario = Depends(auth.get_admin_user)):
    """
    Desativa o usuário. Usuários não são excluídos para preservar vínculos com escolas e eventos.
    """
    usuarios_service.atualizar_usuario(db, user_id, {"ativo": False})
    return None
