import logging

from jogos_escolares.config import Config
from jogos_escolares.database import SessionLocal
from jogos_escolares.auth import get_password_hash
from jogos_escolares.models.usuario import Usuario, ADMIN

# Importação dos outros modelos para garantir que o SQLAlchemy registre tudo
from jogos_escolares import models


def create_first_user():
    db = SessionLocal()

    try:
        user = db.query(Usuario).filter(Usuario.role == ADMIN).first()

        if not user:
            logging.info("Criando primeiro usuário administrador...")
            db_user = Usuario(
                email=Config.ADMIN_EMAIL,
                nome="Admin do Sistema",
                hashed_password=get_password_hash(Config.ADMIN_PASSWORD),
                role=ADMIN
            )
            db.add(db_user)
            db.commit()
            logging.info(f"Usuário administrador {Config.ADMIN_EMAIL} criado.")
        else:
            logging.info(f"Usuário administrador '{user.email}' já existe.")

    except Exception as e:
        logging.error(f"Erro ao criar usuário administrador: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    from jogos_escolares.database import engine, Base
    Base.metadata.create_all(bind=engine)
    create_first_user()
