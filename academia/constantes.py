# -*- coding: utf-8 -*-
"""
Listas de referência usadas pelos formulários e pelo financeiro.
"""

CATEGORIAS_RECEITA = [
    "Mensalidade",
    "Renovação",
    "Diária",
    "Venda de Produtos",
    "Avaliação Física",
    "Saldo do Mês Anterior",
    "Outros",
]

CATEGORIAS_DESPESA = [
    "Água",
    "Luz",
    "Aluguel",
    "Manutenção",
    "Limpeza",
    "Marketing",
    "Salários",
    "Outros",
]

FORMAS_PAGAMENTO = [
    "PIX",
    "Dinheiro",
    "Cartão de Crédito",
    "Cartão de Débito",
    "Transferência",
]

CATEGORIA_MATRICULA = "Mensalidade"
CATEGORIA_RENOVACAO = "Renovação"

# Radar de cobrança: vencidos + próximos N dias
JANELA_ALERTA_DIAS = 3

# Grade de horários de treino (05:00 - 21:00)
HORARIOS_TREINO = ["%02d:00" % hora for hora in range(5, 22)]
