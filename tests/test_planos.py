from academia.resultado import TipoErro
from academia.schemas.plano import PlanoCreate, PlanoUpdate
from academia.servicos import planos as servico


def test_listagem_por_valor(sessao, store):
    for nome, valor in [("Anual", 900), ("Mensal", 100), ("Semestral", 500)]:
        servico.salvar_plano(sessao, store, PlanoCreate(nome=nome, valor=valor, duracao_dias=30))

    planos = servico.listar_planos(sessao, store).valor
    assert [p.nome for p in planos] == ["Mensal", "Semestral", "Anual"]
    assert len({p.id for p in planos}) == 3


def test_atualizacao_parcial(sessao, store, plano_mensal):
    resultado = servico.salvar_plano(sessao, store, PlanoUpdate(valor=120), plano_id=plano_mensal.id)
    assert resultado.ok
    assert resultado.valor.valor == 120
    assert resultado.valor.nome == "Mensal"
    assert resultado.valor.duracao_dias == 30
    assert servico.obter_plano(sessao, store, plano_mensal.id).valor.valor == 120


def test_atualizar_plano_inexistente(sessao, store):
    resultado = servico.salvar_plano(sessao, store, PlanoUpdate(nome="X"), plano_id="nao-existe")
    assert resultado.tipo == TipoErro.NAO_ENCONTRADO


def test_excluir_plano_com_aluno(sessao, store, aluno_matriculado, plano_mensal):
    assert servico.excluir_plano(sessao, store, plano_mensal.id).ok
    assert servico.listar_planos(sessao, store).valor == []
    assert servico.obter_plano(sessao, store, plano_mensal.id).tipo == TipoErro.NAO_ENCONTRADO
    assert servico.excluir_plano(sessao, store, plano_mensal.id).tipo == TipoErro.NAO_ENCONTRADO
