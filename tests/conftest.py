"""
Fixtures compartilhadas: banco SQLite em memória recriado a cada teste,
usuários por papel e um TestClient com tokens prontos.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "chave-de-teste")

from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from jogos_escolares import auth
from jogos_escolares.database import Base, SessionLocal, engine
from jogos_escolares.models.escola import Escola
from jogos_escolares.models.evento import Evento
from jogos_escolares.models.modalidade import Modalidade
from jogos_escolares.models.participante import Participante, ATLETA
from jogos_escolares.models.permissao import Permissao, OWNER
from jogos_escolares.models.usuario import Usuario, ADMIN, PRODUCER, SCHOOL_ADMIN
from main import app


@pytest.fixture(autouse=True)
def banco():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(banco):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(banco):
    return TestClient(app)


def criar_usuario(db, email, role, escola_id=None, nome=None):
    usuario = Usuario(
        email=email,
        nome=nome or email.split("@")[0],
        hashed_password=auth.get_password_hash("senha123"),
        role=role,
        escola_id=escola_id,
    )
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


def headers_de(usuario):
    return {"Authorization": f"Bearer {auth.token_para_usuario(usuario)}"}


def criar_evento(db, dono, status_admin="PUBLICADO", inicio=None, fim=None, nome="Jogos Escolares 2026"):
    agora = datetime.utcnow()
    evento = Evento(
        nome=nome,
        local="Ginásio Municipal",
        data_inicio=inicio or agora + timedelta(days=30),
        data_fim=fim or agora + timedelta(days=40),
        status_admin=status_admin,
        criado_por_id=dono.id,
    )
    db.add(evento)
    db.flush()
    db.add(Permissao(usuario_id=dono.id, evento_id=evento.id, papel=OWNER))
    db.commit()
    db.refresh(evento)
    return evento


def criar_modalidade(db, nome, tipo="individual", genero="misto", idade_minima=0, idade_maxima=99, prova=None):
    modalidade = Modalidade(nome=nome, tipo=tipo, genero=genero, idade_minima=idade_minima,
                            idade_maxima=idade_maxima, prova=prova)
    db.add(modalidade)
    db.commit()
    db.refresh(modalidade)
    return modalidade


def criar_escola(db, inep="12345678", eventos=None, nome="Escola Estadual Centro"):
    escola = Escola(inep=inep, nome=nome, municipio="Palmas")
    escola.eventos = list(eventos or [])
    db.add(escola)
    db.commit()
    db.refresh(escola)
    return escola


def criar_participante(db, escola, nome="Ana Souza", sexo="Feminino", data_nascimento=None, tipo=ATLETA):
    participante = Participante(
        escola_id=escola.id,
        tipo=tipo,
        nome=nome,
        sexo=sexo,
        data_nascimento=data_nascimento or date(2014, 3, 10),
    )
    db.add(participante)
    db.commit()
    db.refresh(participante)
    return participante


@pytest.fixture
def admin(db):
    return criar_usuario(db, "admin@exemplo.com.br", ADMIN, nome="Administrador")


@pytest.fixture
def produtor(db):
    return criar_usuario(db, "produtor@exemplo.com.br", PRODUCER, nome="Paula Produtora")


@pytest.fixture
def outro_produtor(db):
    return criar_usuario(db, "outro.produtor@exemplo.com.br", PRODUCER, nome="Otávio Produtor")


@pytest.fixture
def evento(db, produtor):
    return criar_evento(db, produtor)


@pytest.fixture
def escola(db, evento):
    return criar_escola(db, eventos=[evento])


@pytest.fixture
def gestor_escola(db, escola):
    return criar_usuario(db, "diretoria@exemplo.com.br", SCHOOL_ADMIN, escola_id=escola.id)
