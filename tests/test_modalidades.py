import pytest

from jogos_escolares.exceptions import NotFoundError, ValidationError
from jogos_escolares.services import inscricoes, modalidades
from tests.conftest import criar_participante


class TestCatalogo:
    def test_normaliza_tipo_e_genero(self, db):
        modalidade = modalidades.criar_modalidade(db, {
            "nome": "Vôlei", "tipo": "Coletiva", "genero": "Feminino", "idade_minima": 12, "idade_maxima": 14,
        })
        assert modalidade.tipo == "coletiva"
        assert modalidade.genero == "feminino"

    def test_genero_invalido(self, db):
        with pytest.raises(ValidationError):
            modalidades.criar_modalidade(db, {"nome": "Vôlei", "tipo": "coletiva", "genero": "outro"})

    def test_faixa_invertida(self, db):
        with pytest.raises(ValidationError):
            modalidades.criar_modalidade(db, {"nome": "Judô", "tipo": "individual", "genero": "misto",
                                              "idade_minima": 15, "idade_maxima": 12})

    def test_faixa_invertida_na_edicao(self, db):
        judo = modalidades.criar_modalidade(db, {"nome": "Judô", "tipo": "individual", "genero": "misto",
                                                 "idade_minima": 10, "idade_maxima": 12})
        with pytest.raises(ValidationError):
            modalidades.atualizar_modalidade(db, judo.id, {"idade_minima": 13})
        assert modalidades.obter_modalidade(db, judo.id).idade_minima == 10

    def test_excluir_com_inscricao(self, db, evento, escola):
        judo = modalidades.criar_modalidade(db, {"nome": "Judô", "tipo": "individual", "genero": "misto"})
        atleta = criar_participante(db, escola)
        inscricoes.criar_inscricao(db, atleta.id, evento.id, judo.id)
        with pytest.raises(ValidationError):
            modalidades.excluir_modalidade(db, judo.id)

    def test_excluir_remove_associacao(self, db, evento):
        judo = modalidades.criar_modalidade(db, {"nome": "Judô", "tipo": "individual", "genero": "misto"})
        modalidades.definir_modalidades_evento(db, evento.id, [judo.id])
        modalidades.excluir_modalidade(db, judo.id)
        assert modalidades.ids_modalidades_evento(db, evento.id) == []


class TestAssociacaoEvento:
    def test_definir_substitui_lista(self, db, evento):
        judo = modalidades.criar_modalidade(db, {"nome": "Judô", "tipo": "individual", "genero": "misto"})
        xadrez = modalidades.criar_modalidade(db, {"nome": "Xadrez", "tipo": "individual", "genero": "misto"})

        modalidades.definir_modalidades_evento(db, evento.id, [judo.id, xadrez.id])
        modalidades.definir_modalidades_evento(db, evento.id, [xadrez.id])
        assert modalidades.ids_modalidades_evento(db, evento.id) == [xadrez.id]

    def test_modalidade_inexistente(self, db, evento):
        with pytest.raises(NotFoundError):
            modalidades.definir_modalidades_evento(db, evento.id, [999])
