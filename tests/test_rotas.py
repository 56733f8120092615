"""
Testes da API HTTP: autenticação, permissões por papel e o formato das respostas de erro.
"""
from datetime import date, datetime, timedelta

from jogos_escolares.models.permissao import ASSISTANT, OBSERVER
from jogos_escolares.models.usuario import PRODUCER
from jogos_escolares.services import equipe, vinculos_tecnicos
from tests.conftest import (criar_escola, criar_evento, criar_modalidade, criar_participante, criar_usuario,
                            headers_de)


def _evento_payload(**extra):
    agora = datetime.utcnow()
    payload = {
        "nome": "Jogos Escolares 2026",
        "local": "Ginásio Municipal",
        "data_inicio": (agora + timedelta(days=10)).isoformat(),
        "data_fim": (agora + timedelta(days=12)).isoformat(),
    }
    payload.update(extra)
    return payload


class TestAuth:
    def test_sem_token(self, client):
        response = client.get("/api/v1/eventos")
        assert response.status_code == 401

    def test_login(self, client, db):
        criar_usuario(db, "login@exemplo.com.br", PRODUCER)
        response = client.post("/api/v1/auth/token",
                               data={"username": "login@exemplo.com.br", "password": "senha123"})
        assert response.status_code == 200
        assert response.json()["user_info"]["role"] == PRODUCER

    def test_login_senha_errada(self, client, db):
        criar_usuario(db, "login@exemplo.com.br", PRODUCER)
        response = client.post("/api/v1/auth/token",
                               data={"username": "login@exemplo.com.br", "password": "errada"})
        assert response.status_code == 401

    def test_registrar_produtor(self, client):
        response = client.post("/api/v1/auth/registrar-produtor", json={
            "email": "novo@exemplo.com.br", "nome": "Nova Produtora", "password": "senha123",
        })
        assert response.status_code == 201
        token = response.json()["access_token"]

        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["email"] == "novo@exemplo.com.br"


class TestEventos:
    def test_criar_evento_retorna_status_calculado(self, client, produtor):
        response = client.post("/api/v1/eventos", json=_evento_payload(), headers=headers_de(produtor))
        assert response.status_code == 201
        data = response.json()
        assert data["status_admin"] == "RASCUNHO"
        assert data["status_tempo"] == "AGENDADO"
        assert data["editavel"] is True
        assert data["meu_papel"] == "owner"

    def test_escola_nao_cria_evento(self, client, gestor_escola):
        response = client.post("/api/v1/eventos", json=_evento_payload(), headers=headers_de(gestor_escola))
        assert response.status_code == 403

    def test_fim_antes_do_inicio_vira_400(self, client, produtor):
        agora = datetime.utcnow()
        payload = _evento_payload(data_fim=agora.isoformat(), data_inicio=(agora + timedelta(days=1)).isoformat())
        response = client.post("/api/v1/eventos", json=payload, headers=headers_de(produtor))
        assert response.status_code == 400
        assert "detail" in response.json()

    def test_evento_inexistente_vira_404(self, client, produtor):
        response = client.get("/api/v1/eventos/999", headers=headers_de(produtor))
        assert response.status_code == 404
        assert response.json()["detail"] == "Evento não encontrado"

    def test_apenas_gestores_alteram(self, client, db, evento, outro_produtor):
        response = client.put(f"/api/v1/eventos/{evento.id}", json={"local": "Estádio"},
                              headers=headers_de(outro_produtor))
        assert response.status_code == 403

        equipe.adicionar_membro(db, outro_produtor.id, evento.id, ASSISTANT)
        response = client.put(f"/api/v1/eventos/{evento.id}", json={"local": "Estádio"},
                              headers=headers_de(outro_produtor))
        assert response.status_code == 200
        assert response.json()["local"] == "Estádio"

    def test_cancelar_bloqueia_edicao(self, client, evento, produtor):
        response = client.post(f"/api/v1/eventos/{evento.id}/status", json={"status_admin": "CANCELADO"},
                               headers=headers_de(produtor))
        assert response.json()["editavel"] is False

        response = client.put(f"/api/v1/eventos/{evento.id}", json={"local": "Estádio"}, headers=headers_de(produtor))
        assert response.status_code == 400


class TestEquipeRotas:
    def test_owner_nao_removido_via_api(self, client, evento, produtor):
        response = client.delete(f"/api/v1/eventos/{evento.id}/equipe/{produtor.id}", headers=headers_de(produtor))
        assert response.status_code == 400

    def test_observador_ve_mas_nao_altera(self, client, db, evento, outro_produtor, admin):
        equipe.adicionar_membro(db, outro_produtor.id, evento.id, OBSERVER)

        response = client.get(f"/api/v1/eventos/{evento.id}/equipe", headers=headers_de(outro_produtor))
        assert response.status_code == 200
        assert len(response.json()) == 2

        response = client.post(f"/api/v1/eventos/{evento.id}/equipe",
                               json={"usuario_id": admin.id, "papel": ASSISTANT},
                               headers=headers_de(outro_produtor))
        assert response.status_code == 403


class TestCadastroEscolaRotas:
    def _payload(self, evento_id, email):
        return {
            "evento_id": evento_id,
            "escola": {"nome": "Escola Municipal Vila Nova", "inep": "87654321", "email": ""},
            "responsavel": {"email": email, "password": "senha123", "nome": "Marta Lima"},
        }

    def test_cadastro_publico_e_mesclagem(self, client, db, produtor, evento):
        segundo = criar_evento(db, produtor, nome="Jogos Escolares Regionais")

        response = client.post("/api/v1/escolas/cadastro", json=self._payload(evento.id, "marta@exemplo.com.br"))
        assert response.status_code == 201
        assert response.json()["mesclada"] is False

        response = client.post("/api/v1/escolas/cadastro", json=self._payload(segundo.id, "joao@exemplo.com.br"))
        data = response.json()
        assert data["mesclada"] is True
        assert data["escola"]["evento_ids"] == sorted([evento.id, segundo.id])

        minha = client.get("/api/v1/escolas/minha", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert minha.json()["id"] == data["escola"]["id"]

    def test_verificar_inep_repetido_no_evento(self, client, evento):
        client.post("/api/v1/escolas/cadastro", json=self._payload(evento.id, "marta@exemplo.com.br"))
        response = client.post("/api/v1/escolas/cadastro/verificar-inep",
                               json={"inep": "87654321", "evento_id": evento.id})
        assert response.status_code == 400

    def test_escola_nao_ve_outra_escola(self, client, db, gestor_escola):
        outra = criar_escola(db, inep="99999999", nome="Outra Escola")
        response = client.get(f"/api/v1/escolas/{outra.id}", headers=headers_de(gestor_escola))
        assert response.status_code == 403


class TestParticipantesEInscricoes:
    def test_fluxo_de_inscricao(self, client, db, evento, escola, gestor_escola):
        atletismo = criar_modalidade(db, "Atletismo", idade_minima=10, idade_maxima=12, prova="100m Rasos")
        criar_modalidade(db, "Futsal", tipo="coletiva", genero="masculino", idade_minima=10, idade_maxima=12)
        hoje = date.today()
        nascimento = date(hoje.year - 11, 1, 1)

        response = client.post("/api/v1/participantes", headers=headers_de(gestor_escola), json={
            "nome": "Ana Souza", "sexo": "Feminino", "data_nascimento": nascimento.isoformat(),
        })
        assert response.status_code == 201
        atleta = response.json()
        assert atleta["escola_id"] == escola.id
        assert atleta["idade"] == 11

        response = client.get(f"/api/v1/participantes/{atleta['id']}/elegibilidade/{evento.id}",
                              params={"tipo": "individual", "nome": "Atletismo"},
                              headers=headers_de(gestor_escola))
        funil = response.json()
        assert funil["tipos"] == ["individual"]
        assert funil["prova_selecionada_id"] == atletismo.id
        assert funil["provas"][0]["rotulo"] == "100m Rasos"

        inscricao = {"atleta_id": atleta["id"], "evento_id": evento.id, "modalidade_id": atletismo.id}
        response = client.post("/api/v1/inscricoes", json=inscricao, headers=headers_de(gestor_escola))
        assert response.status_code == 201

        response = client.post("/api/v1/inscricoes", json=inscricao, headers=headers_de(gestor_escola))
        assert response.status_code == 400

        response = client.get("/api/v1/inscricoes", params={"participante_id": atleta["id"], "evento_id": evento.id},
                              headers=headers_de(gestor_escola))
        assert len(response.json()) == 1

    def test_escola_nao_inscreve_atleta_de_outra(self, client, db, evento, gestor_escola):
        outra = criar_escola(db, inep="99999999", nome="Outra Escola")
        atleta = criar_participante(db, outra)
        modalidade = criar_modalidade(db, "Judô")
        response = client.post("/api/v1/inscricoes", headers=headers_de(gestor_escola), json={
            "atleta_id": atleta.id, "evento_id": evento.id, "modalidade_id": modalidade.id,
        })
        assert response.status_code == 403


class TestEscolaDaInscricaoRotas:
    def test_escola_id_de_outra_escola_vira_400(self, client, db, evento, escola, gestor_escola):
        outra = criar_escola(db, inep="99999999", nome="Outra Escola")
        atleta = criar_participante(db, escola)
        modalidade = criar_modalidade(db, "Judô")
        response = client.post("/api/v1/inscricoes", headers=headers_de(gestor_escola), json={
            "atleta_id": atleta.id, "evento_id": evento.id, "modalidade_id": modalidade.id, "escola_id": outra.id,
        })
        assert response.status_code == 400


class TestCadastroEventoCanceladoRotas:
    def test_verificar_inep_em_evento_cancelado(self, client, db, produtor):
        cancelado = criar_evento(db, produtor, status_admin="CANCELADO")
        response = client.post("/api/v1/escolas/cadastro/verificar-inep",
                               json={"inep": "87654321", "evento_id": cancelado.id})
        assert response.status_code == 400


class TestTecnicosRotas:
    def test_gestor_da_escola_gerencia_tecnicos(self, client, db, evento, escola, gestor_escola):
        judo = criar_modalidade(db, "Judô")
        evento.modalidades = [judo]
        db.commit()
        tecnico = criar_usuario(db, "tecnico@exemplo.com.br", "participant", escola_id=escola.id)

        response = client.post(f"/api/v1/escolas/{escola.id}/tecnicos", headers=headers_de(gestor_escola),
                               json={"usuario_id": tecnico.id, "modalidade_ids": [judo.id]})
        assert response.status_code == 201
        vinculo = response.json()
        assert vinculo["modalidade_ids"] == [judo.id]

        response = client.get(f"/api/v1/escolas/{escola.id}/tecnicos", headers=headers_de(gestor_escola))
        assert [v["usuario_id"] for v in response.json()] == [tecnico.id]

        response = client.delete(f"/api/v1/escolas/{escola.id}/tecnicos/{vinculo['id']}",
                                 headers=headers_de(gestor_escola))
        assert response.status_code == 204

    def test_vinculo_de_outra_escola(self, client, db, escola, admin):
        outra = criar_escola(db, inep="99999999", nome="Outra Escola")
        tecnico = criar_usuario(db, "tecnico@exemplo.com.br", "participant")
        vinculo = vinculos_tecnicos.adicionar_tecnico(db, outra.id, tecnico.id, [])

        response = client.delete(f"/api/v1/escolas/{escola.id}/tecnicos/{vinculo.id}", headers=headers_de(admin))
        assert response.status_code == 404
