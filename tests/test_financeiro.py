from datetime import date

import pytest

from academia import exportacao
from academia.resultado import TipoErro
from academia.schemas.transacao import TipoTransacao, TransacaoCreate, TransacaoRead
from academia.servicos import financeiro as servico


def _lancar(sessao, store, data, tipo=TipoTransacao.RECEITA, valor=50.0, **kw):
    dados = TransacaoCreate(data=data, tipo=tipo, categoria=kw.pop("categoria", "Outros"), valor=valor, **kw)
    return servico.adicionar_transacao(sessao, store, dados).valor


def test_competencia_padrao_e_a_data(sessao, store):
    t = _lancar(sessao, store, date(2024, 6, 3))
    assert t.data_competencia == date(2024, 6, 3)

    outra = _lancar(sessao, store, date(2024, 6, 3), data_competencia=date(2024, 5, 31))
    assert outra.data_competencia == date(2024, 5, 31)


def test_campos_vazios_viram_none(sessao, store):
    t = _lancar(sessao, store, date(2024, 6, 3), aluno_id="", forma_pagamento="")
    assert t.aluno_id is None
    assert t.forma_pagamento is None


def test_listagem_mais_recente_primeiro(sessao, store):
    for dia in (5, 20, 1):
        _lancar(sessao, store, date(2024, 6, dia))
    datas = [t.data.day for t in servico.listar_transacoes(sessao, store).valor]
    assert datas == [20, 5, 1]


def test_excluir_transacao(sessao, store):
    t = _lancar(sessao, store, date(2024, 6, 3))
    assert servico.excluir_transacao(sessao, store, t.id).ok
    assert servico.listar_transacoes(sessao, store).valor == []
    resultado = servico.excluir_transacao(sessao, store, t.id)
    assert resultado.tipo == TipoErro.NAO_ENCONTRADO
    assert resultado.detalhe == "Transação não encontrada"


def test_gerar_csv():
    transacoes = [
        TransacaoRead(
            id="1", data=date(2024, 6, 15), tipo=TipoTransacao.RECEITA, categoria="Mensalidade",
            valor=100, descricao="Matrícula: Ana; Silva (Mensal)", forma_pagamento="PIX",
        ),
        TransacaoRead(
            id="2", data=date(2024, 6, 2), tipo=TipoTransacao.DESPESA, categoria="Luz",
            valor=250.5, descricao="Conta de luz",
        ),
    ]
    assert exportacao.gerar_csv(transacoes) == (
        "\ufeffData;Tipo;Categoria;Descrição;Valor;Forma Pagamento\n"
        "02/06/2024;Despesa;Luz;Conta de luz;250,50;\n"
        "15/06/2024;Receita;Mensalidade;Matrícula: Ana  Silva (Mensal);100,00;PIX\n"
    )


def test_exportar_por_mes(sessao, store):
    _lancar(sessao, store, date(2024, 5, 31), valor=10)
    _lancar(sessao, store, date(2024, 6, 1), valor=20)
    _lancar(sessao, store, date(2024, 6, 30), tipo=TipoTransacao.DESPESA, valor=5)
    _lancar(sessao, store, date(2024, 7, 1), valor=40)

    nome, conteudo = servico.exportar_csv(sessao, store, mes="2024-06").valor

    assert nome == "relatorio_2024-06.csv"
    linhas = conteudo.splitlines()
    assert len(linhas) == 3
    assert linhas[1].startswith("01/06/2024;Receita")
    assert linhas[2].startswith("30/06/2024;Despesa")


def test_exportar_por_periodo_inclui_extremos(sessao, store):
    for dia in (1, 10, 11):
        _lancar(sessao, store, date(2024, 6, dia))

    nome, conteudo = servico.exportar_csv(sessao, store, inicio=date(2024, 6, 1), fim=date(2024, 6, 10)).valor

    assert nome == "relatorio_2024-06-01_ate_2024-06-10.csv"
    assert len(conteudo.splitlines()) == 3


@pytest.mark.parametrize("kwargs, detalhe", [
    ({"mes": "06/2024"}, "Mês inválido. Use o formato AAAA-MM."),
    ({"inicio": date(2024, 6, 1)}, "Por favor, selecione as datas de início e fim."),
    ({}, "Por favor, selecione as datas de início e fim."),
    ({"mes": "2023-01"}, "Nenhuma transação encontrada para o período selecionado."),
])
def test_exportar_erros(sessao, store, kwargs, detalhe):
    _lancar(sessao, store, date(2024, 6, 1))
    resultado = servico.exportar_csv(sessao, store, **kwargs)
    assert resultado.tipo == TipoErro.VALIDACAO
    assert resultado.detalhe == detalhe


def test_listagem_filtrada_por_mes(sessao, store):
    _lancar(sessao, store, date(2024, 5, 31))
    _lancar(sessao, store, date(2024, 6, 1))
    _lancar(sessao, store, date(2024, 6, 30), tipo=TipoTransacao.DESPESA)
    _lancar(sessao, store, date(2024, 7, 1))

    do_mes = servico.listar_transacoes(sessao, store, mes="2024-06").valor
    assert [t.data for t in do_mes] == [date(2024, 6, 30), date(2024, 6, 1)]
    assert servico.listar_transacoes(sessao, store, mes="2023-06").valor == []
    assert len(servico.listar_transacoes(sessao, store).valor) == 4


@pytest.mark.parametrize("mes", ["2024-6", "2024-13", "junho"])
def test_listagem_mes_invalido(sessao, store, mes):
    resultado = servico.listar_transacoes(sessao, store, mes=mes)
    assert resultado.tipo == TipoErro.VALIDACAO
    assert resultado.detalhe == "Mês inválido. Use o formato AAAA-MM."


def test_resumo_mensal(sessao, store):
    _lancar(sessao, store, date(2024, 6, 1), valor=300)
    _lancar(sessao, store, date(2024, 6, 15), valor=120)
    _lancar(sessao, store, date(2024, 6, 20), tipo=TipoTransacao.DESPESA, valor=250.5)
    _lancar(sessao, store, date(2024, 7, 1), valor=999)

    resumo = servico.resumo_mensal(sessao, store, "2024-06").valor
    assert resumo.mes == "2024-06"
    assert resumo.receitas == 420
    assert resumo.despesas == 250.5
    assert resumo.saldo == 169.5


def test_resumo_de_mes_vazio(sessao, store):
    _lancar(sessao, store, date(2024, 6, 1), valor=300)
    resumo = servico.resumo_mensal(sessao, store, "2024-02").valor
    assert (resumo.receitas, resumo.despesas, resumo.saldo) == (0, 0, 0)
    assert servico.resumo_mensal(sessao, store, "02/2024").tipo == TipoErro.VALIDACAO
