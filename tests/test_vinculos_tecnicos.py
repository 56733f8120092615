import pytest

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.usuario import PARTICIPANT
from jogos_escolares.models.vinculo_tecnico import VinculoTecnico
from jogos_escolares.services import vinculos_tecnicos
from tests.conftest import criar_escola, criar_evento, criar_modalidade, criar_usuario


@pytest.fixture
def judo(db, evento):
    modalidade = criar_modalidade(db, "Judô")
    evento.modalidades = [modalidade]
    db.commit()
    return modalidade


@pytest.fixture
def xadrez(db):
    return criar_modalidade(db, "Xadrez")


@pytest.fixture
def tecnico(db, escola):
    return criar_usuario(db, "tecnico@exemplo.com.br", PARTICIPANT, escola_id=escola.id, nome="Carlos Técnico")


class TestAdicionarTecnico:
    def test_vincula_com_modalidades_do_evento(self, db, escola, tecnico, judo):
        vinculo = vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [judo.id])
        assert vinculo.modalidade_ids == [judo.id]
        assert [v.usuario_id for v in vinculos_tecnicos.listar_tecnicos(db, escola.id)] == [tecnico.id]

    def test_usuario_ja_vinculado(self, db, escola, tecnico, judo):
        vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [judo.id])
        with pytest.raises(ValidationError) as erro:
            vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [])
        assert erro.value.mensagem == vinculos_tecnicos.MENSAGEM_JA_VINCULADO
        assert db.query(VinculoTecnico).count() == 1

    def test_modalidade_fora_dos_eventos_da_escola(self, db, escola, tecnico, judo, xadrez):
        with pytest.raises(ValidationError):
            vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [judo.id, xadrez.id])
        assert db.query(VinculoTecnico).count() == 0

    def test_evento_legado_conta(self, db, produtor, tecnico, xadrez):
        legado = criar_evento(db, produtor, nome="Jogos Antigos")
        legado.modalidades = [xadrez]
        escola = criar_escola(db, inep="55555555", nome="Escola Legada")
        escola.evento_id = legado.id
        db.commit()

        vinculo = vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [xadrez.id])
        assert vinculo.modalidade_ids == [xadrez.id]

    def test_escola_sem_eventos(self, db, tecnico, xadrez):
        escola = criar_escola(db, inep="55555555", nome="Escola Sem Evento")
        with pytest.raises(ValidationError):
            vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [xadrez.id])
        # Sem modalidades o vínculo não depende dos eventos
        assert vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, []).modalidade_ids == []

    def test_usuario_inexistente(self, db, escola):
        with pytest.raises(NotFoundError):
            vinculos_tecnicos.adicionar_tecnico(db, escola.id, 999, [])


class TestAlterarVinculo:
    def test_atualizar_modalidades(self, db, escola, tecnico, judo, xadrez):
        vinculo = vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [judo.id])

        with pytest.raises(ValidationError):
            vinculos_tecnicos.atualizar_modalidades(db, vinculo.id, [xadrez.id])

        vinculo = vinculos_tecnicos.atualizar_modalidades(db, vinculo.id, [])
        assert vinculo.modalidade_ids == []

    def test_remover(self, db, escola, tecnico, judo):
        vinculo = vinculos_tecnicos.adicionar_tecnico(db, escola.id, tecnico.id, [judo.id])
        vinculos_tecnicos.remover_tecnico(db, vinculo.id)
        assert vinculos_tecnicos.listar_tecnicos(db, escola.id) == []

    def test_remover_inexistente(self, db):
        with pytest.raises(NotFoundError):
            vinculos_tecnicos.remover_tecnico(db, 999)
