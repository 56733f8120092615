# -*- coding: utf-8 -*-
"""
Resolução das modalidades em que um atleta ou técnico pode se inscrever num evento.

O funil tem três estágios de seleção (tipo -> nome -> prova), precedidos pelos
filtros de associação ao evento, gênero e idade. Cada estágio é uma função pura
sobre a lista já filtrada, de modo que uma opção do estágio 2 ou 3 nunca
contradiz o tipo escolhido no estágio 1.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from jogos_escolares.exceptions import NotFoundError
from jogos_escolares.models.modalidade import Modalidade
from jogos_escolares.models.participante import Participante, ATLETA
from jogos_escolares.services.ciclo_evento import obter_evento

GENERO_MISTO = "misto"


@dataclass
class FunilElegibilidade:
    tipos: List[str] = field(default_factory=list)
    nomes: List[str] = field(default_factory=list)
    provas: List[Modalidade] = field(default_factory=list)
    prova_selecionada: Optional[Modalidade] = None


def calcular_idade(data_nascimento: date, hoje: Optional[date] = None) -> int:
    """Idade em anos completos."""
    return relativedelta(hoje or date.today(), data_nascimento).years


def filtrar_associadas(modalidades: Iterable, ids_associados: Iterable[int]) -> list:
    ids = set(ids_associados or [])
    # Evento sem associação explícita libera o catálogo inteiro
    if not ids:
        return list(modalidades)
    return [m for m in modalidades if m.id in ids]


def filtrar_genero(modalidades: Iterable, sexo: str) -> list:
    sexo = (sexo or "").strip().lower()
    return [
        m for m in modalidades
        if m.genero.lower() == GENERO_MISTO or m.genero.lower() == sexo
    ]


def filtrar_idade(modalidades: Iterable, idade: int) -> list:
    return [m for m in modalidades if m.idade_minima <= idade <= m.idade_maxima]


def modalidades_elegiveis(participante, modalidades: Iterable, ids_associados: Iterable[int],
                          hoje: Optional[date] = None) -> list:
    elegiveis = filtrar_associadas(modalidades, ids_associados)
    elegiveis = filtrar_genero(elegiveis, participante.sexo)
    # Técnicos não competem em categorias por idade
    if participante.tipo == ATLETA:
        elegiveis = filtrar_idade(elegiveis, calcular_idade(participante.data_nascimento, hoje))
    return elegiveis


def _distintos(valores: Iterable[str]) -> List[str]:
    vistos = []
    for valor in valores:
        if valor not in vistos:
            vistos.append(valor)
    return vistos


def tipos_disponiveis(elegiveis: Iterable) -> List[str]:
    return _distintos(m.tipo for m in elegiveis)


def nomes_disponiveis(elegiveis: Iterable, tipo: str) -> List[str]:
    return _distintos(m.nome for m in elegiveis if m.tipo == tipo)


def provas_disponiveis(elegiveis: Iterable, tipo: str, nome: str) -> list:
    return [m for m in elegiveis if m.tipo == tipo and m.nome == nome]


def rotulo_prova(modalidade) -> str:
    if modalidade.prova:
        return modalidade.prova
    return f"{modalidade.idade_minima}-{modalidade.idade_maxima} anos"


def resolver_prova_automatica(provas: list):
    """Com uma única prova possível ela é selecionada sem pedir escolha ao usuário."""
    if len(provas) == 1:
        return provas[0]
    return None


def montar_funil(db: Session, participante_id: int, evento_id: int, tipo: Optional[str] = None,
                 nome: Optional[str] = None, hoje: Optional[date] = None) -> FunilElegibilidade:
    participante = db.query(Participante).filter(Participante.id == participante_id).first()
    if participante is None:
        raise NotFoundError("Participante não encontrado")
    evento = obter_evento(db, evento_id)

    catalogo = db.query(Modalidade).order_by(Modalidade.nome, Modalidade.idade_minima).all()
    ids_associados = [m.id for m in evento.modalidades]
    elegiveis = modalidades_elegiveis(participante, catalogo, ids_associados, hoje)

    funil = FunilElegibilidade(tipos=tipos_disponiveis(elegiveis))
    if tipo is None:
        return funil
    funil.nomes = nomes_disponiveis(elegiveis, tipo)
    if nome is None:
        return funil
    funil.provas = provas_disponiveis(elegiveis, tipo, nome)
    funil.prova_selecionada = resolver_prova_automatica(funil.provas)
    return funil
