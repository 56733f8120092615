# jogos_escolares/routes/auth_fastapi.py
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from jogos_escolares import auth, database
from jogos_escolares.models import usuario as models_usuario
from jogos_escolares.schemas import usuario as schemas_usuario
from jogos_escolares.services import usuarios as usuarios_service


router = APIRouter(
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

@router.post("/token", response_model=schemas_usuario.Token)
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(database.get_db)):
    user = auth.get_user(db, email=form_data.username)  # Usamos email como username
    if not user or not user.hashed_password or not auth.verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou senha incorretos",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.ativo:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Sua conta está desativada.")

    user_info = schemas_usuario.UsuarioRead.from_orm(user)
    return {"access_token": auth.token_para_usuario(user), "token_type": "bearer", "user_info": user_info}

@router.post("/registrar-produtor", response_model=schemas_usuario.Token, status_code=status.HTTP_201_CREATED)
def registrar_produtor(dados: schemas_usuario.ProdutorRegistro, db: Session = Depends(database.get_db)):
    """
    Cadastro público de produtor (organizador de eventos).
    """
    user = usuarios_service.registrar_produtor(db, dados.dict())
    user_info = schemas_usuario.UsuarioRead.from_orm(user)
    return {"access_token": auth.token_para_usuario(user), "token_type": "bearer", "user_info": user_info}

@router.get("/me", response_model=schemas_usuario.UsuarioRead)
async def read_users_me(current_user: models_usuario.Usuario = Depends(auth.get_current_active_user)):
    """
    Retorna os dados do usuário atualmente logado.
    """
    return current_user
