# Em academia/routes/dashboard_fastapi.py

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends

from academia.auth import Sessao, get_sessao
from academia.routes.utils import desembrulhar, get_store
from academia.schemas.dashboard import DashboardRead
from academia.servicos.dashboard import carregar_dashboard
from academia.store import RecordStore

router = APIRouter(
    tags=["Dashboard"],
)


@router.get("", response_model=DashboardRead)
def get_dashboard(
    data_referencia: Optional[date] = None,
    sessao: Sessao = Depends(get_sessao),
    store: RecordStore = Depends(get_store),
):
    """
    KPIs do dia, radar de cobrança (vencidos e próximos 3 dias) e as
    últimas transações. ``data_referencia`` substitui o dia de hoje.
    """
    hoje = data_referencia or date.today()
    return desembrulhar(carregar_dashboard(sessao, store, hoje))
