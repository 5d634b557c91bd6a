import logging

from academia.auth import ErroAutenticacao, get_user, servico_autenticacao
from academia.config import ADMIN_EMAIL, ADMIN_PASSWORD
from academia.database import SessionLocal

logger = logging.getLogger(__name__)


def create_first_user(db=None):
    """Cria a conta do administrador se ela ainda não existir."""
    fechar = db is None
    db = db or SessionLocal()

    try:
        if get_user(db, ADMIN_EMAIL) is None:
            logger.info("Criando primeiro usuário administrador (%s)...", ADMIN_EMAIL)
            servico_autenticacao.sign_up(db, ADMIN_EMAIL, ADMIN_PASSWORD, nome="Admin do Sistema")
        else:
            logger.info("Usuário administrador '%s' já existe.", ADMIN_EMAIL)
    except ErroAutenticacao:
        db.rollback()
        logger.exception("Erro ao criar usuário administrador")
    finally:
        if fechar:
            db.close()


if __name__ == "__main__":
    from academia.database import criar_tabelas

    logging.basicConfig(level=logging.INFO)
    criar_tabelas()
    create_first_user()
