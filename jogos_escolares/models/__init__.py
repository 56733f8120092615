from jogos_escolares.models import (evento, escola, usuario, permissao, modalidade, participante, inscricao,
                                    vinculo_tecnico)
