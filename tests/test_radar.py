from datetime import date
from urllib.parse import unquote

from academia.radar import calcular_kpi, calcular_radar, link_lembrete, montar_itens_radar
from academia.schemas.aluno import AlunoRead, StatusAluno
from academia.schemas.plano import PlanoRead
from academia.schemas.transacao import TipoTransacao, TransacaoRead
from academia.vencimentos import SituacaoVencimento

HOJE = date(2024, 6, 10)


def novo_aluno(id, vencimento, status=StatusAluno.ATIVO, plano_id="p1", nome=None):
    return AlunoRead(
        id=id,
        nome=nome or f"Aluno {id}",
        whatsapp="11987654321",
        plano_id=plano_id,
        data_matricula=date(2024, 1, 1),
        proximo_vencimento=vencimento,
        status=status,
    )


def nova_transacao(id, data, tipo, valor):
    return TransacaoRead(id=id, data=data, tipo=tipo, categoria="Outros", valor=valor)


def test_radar_inclui_ate_tres_dias_a_frente():
    alunos = [
        novo_aluno("a", date(2024, 6, 13)),
        novo_aluno("b", date(2024, 6, 14)),
        novo_aluno("c", date(2024, 6, 5), status=StatusAluno.INATIVO),
        novo_aluno("d", date(2024, 5, 1)),
    ]
    assert [a.id for a in calcular_radar(alunos, HOJE)] == ["d", "a"]


def test_radar_ignora_pendentes():
    alunos = [novo_aluno("a", date(2024, 6, 9), status=StatusAluno.PENDENTE)]
    assert calcular_radar(alunos, HOJE) == []


def test_radar_mantem_ordem_de_entrada_nos_empates():
    alunos = [
        novo_aluno("x", date(2024, 6, 10)),
        novo_aluno("y", date(2024, 6, 8)),
        novo_aluno("z", date(2024, 6, 10)),
    ]
    assert [a.id for a in calcular_radar(alunos, HOJE)] == ["y", "x", "z"]


def test_itens_do_radar_trazem_situacao_e_rotulo():
    itens = montar_itens_radar([novo_aluno("a", date(2024, 6, 7))], HOJE)
    assert len(itens) == 1
    assert itens[0].situacao == SituacaoVencimento.VENCIDO
    assert itens[0].dias == -3
    assert itens[0].rotulo == "Vencido há 3 dias"
    assert itens[0].link_lembrete.startswith("https://wa.me/5511987654321?text=")


def test_kpi():
    planos = [PlanoRead(id="p1", nome="Mensal", valor=100, duracao_dias=30)]
    alunos = [
        novo_aluno("a", HOJE),
        novo_aluno("b", HOJE),
        novo_aluno("c", HOJE, status=StatusAluno.INATIVO),
        novo_aluno("d", date(2024, 7, 1)),
    ]
    transacoes = [
        nova_transacao("t1", date(2024, 6, 1), TipoTransacao.RECEITA, 200),
        nova_transacao("t2", date(2024, 6, 30), TipoTransacao.DESPESA, 80),
        nova_transacao("t3", date(2024, 5, 31), TipoTransacao.RECEITA, 1000),
        nova_transacao("t4", date(2024, 7, 1), TipoTransacao.DESPESA, 1000),
    ]
    kpi = calcular_kpi(alunos, planos, transacoes, HOJE)
    assert kpi.alunos_ativos == 3
    assert kpi.a_receber_hoje == 200
    assert kpi.saldo_mensal == 120


def test_kpi_mes_sem_transacoes():
    kpi = calcular_kpi([], [], [nova_transacao("t", date(2024, 5, 2), TipoTransacao.RECEITA, 50)], HOJE)
    assert kpi.alunos_ativos == 0
    assert kpi.a_receber_hoje == 0
    assert kpi.saldo_mensal == 0


def test_kpi_plano_inexistente_conta_zero():
    alunos = [novo_aluno("a", HOJE, plano_id="removido"), novo_aluno("b", HOJE, plano_id=None)]
    kpi = calcular_kpi(alunos, [], [], HOJE)
    assert kpi.alunos_ativos == 2
    assert kpi.a_receber_hoje == 0


def test_kpi_dezembro_vira_o_ano():
    transacoes = [
        nova_transacao("t1", date(2024, 12, 31), TipoTransacao.RECEITA, 90),
        nova_transacao("t2", date(2025, 1, 1), TipoTransacao.RECEITA, 500),
    ]
    assert calcular_kpi([], [], transacoes, date(2024, 12, 5)).saldo_mensal == 90


def test_link_lembrete_vence_hoje():
    aluno = novo_aluno("a", HOJE, nome="Maria")
    link = link_lembrete(aluno, HOJE)
    numero, texto = link.split("?text=")
    assert numero == "https://wa.me/5511987654321"
    assert " " not in texto
    assert unquote(texto) == (
        "Olá Maria, seu plano vence hoje. "
        "Vamos garantir sua renovação para continuar treinando sem pausas?"
    )


def test_link_lembrete_vencido():
    aluno = novo_aluno("a", date(2024, 6, 8), nome="João")
    texto = unquote(link_lembrete(aluno, HOJE).split("?text=")[1])
    assert texto.startswith("Olá João, seu plano venceu no dia 08/06/2024.")


def test_link_nao_duplica_codigo_do_pais():
    aluno = novo_aluno("a", HOJE).model_copy(update={"whatsapp": "5511987654321"})
    assert link_lembrete(aluno, HOJE).startswith("https://wa.me/5511987654321?")
