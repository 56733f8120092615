import pytest

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.models.inscricao import Inscricao
from jogos_escolares.models.participante import TECNICO
from jogos_escolares.services import inscricoes, participantes
from tests.conftest import criar_escola, criar_modalidade, criar_participante


class TestCriarInscricao:
    def test_inscricao_duplicada(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        modalidade = criar_modalidade(db, "Atletismo")

        inscricao = inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id)
        assert inscricao.escola_id == escola.id
        assert inscricao.status == "Confirmada"

        with pytest.raises(ValidationError) as erro:
            inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id)
        assert erro.value.mensagem == inscricoes.MENSAGEM_DUPLICADA
        assert db.query(Inscricao).count() == 1

    def test_atleta_e_tecnico_nao_colidem(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        tecnico = criar_participante(db, escola, nome="Carlos Técnico", sexo="Masculino", tipo=TECNICO)
        modalidade = criar_modalidade(db, "Futsal", tipo="coletiva")

        inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id)
        inscricoes.criar_inscricao(db, tecnico.id, evento.id, modalidade.id)
        assert db.query(Inscricao).count() == 2

    def test_modalidade_inexistente(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        with pytest.raises(NotFoundError):
            inscricoes.criar_inscricao(db, atleta.id, evento.id, 999)

    def test_participante_inexistente(self, db, evento):
        modalidade = criar_modalidade(db, "Atletismo")
        with pytest.raises(NotFoundError):
            inscricoes.criar_inscricao(db, 999, evento.id, modalidade.id)


class TestExcluirInscricao:
    def test_excluir_e_listar(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        judo = criar_modalidade(db, "Judô")
        xadrez = criar_modalidade(db, "Xadrez")
        primeira = inscricoes.criar_inscricao(db, atleta.id, evento.id, judo.id)
        inscricoes.criar_inscricao(db, atleta.id, evento.id, xadrez.id)

        inscricoes.excluir_inscricao(db, primeira.id)

        restantes = inscricoes.listar_inscricoes(db, atleta.id, evento.id)
        assert [i.modalidade.nome for i in restantes] == ["Xadrez"]

    def test_excluir_inexistente(self, db):
        with pytest.raises(NotFoundError):
            inscricoes.excluir_inscricao(db, 999)

    def test_participante_com_inscricao_nao_e_excluido(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        modalidade = criar_modalidade(db, "Judô")
        inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id)
        with pytest.raises(ValidationError):
            participantes.excluir_participante(db, atleta.id)


class TestEscolaDaInscricao:
    def test_escola_diferente_da_do_participante(self, db, evento, escola):
        outra = criar_escola(db, inep="99999999", nome="Outra Escola")
        atleta = criar_participante(db, escola)
        modalidade = criar_modalidade(db, "Judô")

        with pytest.raises(ValidationError):
            inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id, escola_id=outra.id)
        assert db.query(Inscricao).count() == 0

    def test_escola_informada_igual_a_do_participante(self, db, evento, escola):
        atleta = criar_participante(db, escola)
        modalidade = criar_modalidade(db, "Judô")
        inscricao = inscricoes.criar_inscricao(db, atleta.id, evento.id, modalidade.id, escola_id=escola.id)
        assert inscricao.escola_id == escola.id
