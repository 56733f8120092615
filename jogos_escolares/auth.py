# jogos_escolares/auth.py
from datetime import datetime, timedelta
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from jogos_escolares import database
from jogos_escolares.config import Config
from jogos_escolares.models import usuario as models_usuario


# --- CONFIGURAÇÃO DE SEGURANÇA ---
SECRET_KEY = Config.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = Config.ACCESS_TOKEN_EXPIRE_MINUTES

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def create_access_token(data: dict):
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def token_para_usuario(user: models_usuario.Usuario) -> str:
    return create_access_token(data={"sub": user.email, "role": user.role})

# --- DEPENDÊNCIAS DE AUTENTICAÇÃO E AUTORIZAÇÃO ---
def get_user(db: Session, email: str):
    return db.query(models_usuario.Usuario).filter(models_usuario.Usuario.email == email).first()

async def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(database.get_db)):
    """Usuário da sessão atual (currentUser), usado como autor/responsável nas criações."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Credenciais inválidas", headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")
        if email is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception
    user = get_user(db, email=email)
    if user is None:
        raise credentials_exception
    return user

async def get_current_active_user(current_user: models_usuario.Usuario = Depends(get_current_user)):
    """
    Bloqueia contas desativadas.
    """
    if not current_user.ativo:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Sua conta está desativada."
        )
    return current_user

async def get_produtor_ou_admin(current_user: models_usuario.Usuario = Depends(get_current_active_user)):
    if current_user.role not in (models_usuario.PRODUCER, models_usuario.ADMIN):
        raise HTTPException(status_code=403, detail="Acesso restrito a Produtores ou Administradores.")
    return current_user

async def get_admin_user(current_user: models_usuario.Usuario = Depends(get_current_active_user)):
    """
    Verifica se o usuário atual tem o papel de 'admin'.
    """
    if current_user.role != models_usuario.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acesso restrito a administradores."
        )
    return current_user
