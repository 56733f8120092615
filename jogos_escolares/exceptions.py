# -*- coding: utf-8 -*-
"""
Erros de domínio levantados pelos serviços.

As rotas não precisam capturá-los: main.py registra handlers que os convertem
em respostas 400 (ValidationError) e 404 (NotFoundError) com o campo "detail".
"""


class ErroDominio(Exception):
    """Base dos erros de regra de negócio."""

    def __init__(self, mensagem: str):
        self.mensagem = mensagem
        super().__init__(mensagem)


class ValidationError(ErroDominio):
    """Operação rejeitada por uma regra (INEP duplicado no evento, inscrição repetida, papel owner...)."""


class NotFoundError(ErroDominio):
    """Escola, evento, usuário etc. inexistente para o id informado."""
