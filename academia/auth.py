# academia/auth.py
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Dict, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from academia import database
from academia.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from academia.models.usuario import Usuario

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def create_access_token(data: dict, expira_em: Optional[datetime] = None):
    to_encode = data.copy()
    expire = expira_em or datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def get_user(db: Session, email: str):
    return db.query(Usuario).filter(Usuario.email == email).first()


class ErroAutenticacao(Exception):
    pass


@dataclass(frozen=True)
class Sessao:
    """
    Sessão do usuário logado. É passada explicitamente para todos os
    serviços em vez de ficar num estado global.
    """
    email: str
    access_token: str
    expira_em: datetime
    usuario_id: Optional[int] = None

    def expirada(self, agora: Optional[datetime] = None) -> bool:
        return (agora or datetime.utcnow()) >= self.expira_em


class EventoSessao(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


Ouvinte = Callable[[EventoSessao, Optional[Sessao]], None]


class ServicoAutenticacao:
    """
    Login, cadastro e logout, com notificação de mudanças de sessão para
    quem se inscrever via ``subscribe``.
    """

    def __init__(self):
        self._ouvintes: List[Ouvinte] = []
        # jti -> expiração do token; some da lista quando o token já expirou
        self._revogados: Dict[str, datetime] = {}

    def subscribe(self, ouvinte: Ouvinte) -> Callable[[], None]:
        self._ouvintes.append(ouvinte)

        def unsubscribe():
            if ouvinte in self._ouvintes:
                self._ouvintes.remove(ouvinte)
        return unsubscribe

    def _notificar(self, evento: EventoSessao, sessao: Optional[Sessao]):
        for ouvinte in list(self._ouvintes):
            try:
                ouvinte(evento, sessao)
            except Exception:
                logger.exception("Ouvinte de sessão falhou no evento %s", evento.value)

    def _abrir_sessao(self, usuario: Usuario) -> Sessao:
        expira_em = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token({"sub": usuario.email, "role": usuario.role}, expira_em)
        # O "exp" do JWT tem resolução de segundos
        sessao = Sessao(
            email=usuario.email,
            access_token=token,
            expira_em=expira_em.replace(microsecond=0),
            usuario_id=usuario.id,
        )
        self._notificar(EventoSessao.SIGNED_IN, sessao)
        return sessao

    def sign_up(self, db: Session, email: str, password: str, nome: Optional[str] = None,
                role: str = "administrador") -> Sessao:
        if get_user(db, email) is not None:
            raise ErroAutenticacao("Email já registrado")
        usuario = Usuario(
            email=email,
            nome=nome or email.split("@")[0],
            hashed_password=get_password_hash(password),
            role=role,
        )
        db.add(usuario)
        db.commit()
        db.refresh(usuario)
        logger.info("Usuário %s cadastrado", email)
        return self._abrir_sessao(usuario)

    def sign_in(self, db: Session, email: str, password: str) -> Sessao:
        usuario = get_user(db, email)
        if not usuario or not verify_password(password, usuario.hashed_password):
            raise ErroAutenticacao("Email ou senha incorretos")
        logger.info("Login de %s", email)
        return self._abrir_sessao(usuario)

    def podar_revogados(self, agora: Optional[datetime] = None) -> None:
        """Esquece os tokens revogados que já expiraram; o JWT os rejeita sozinho."""
        agora = agora or datetime.utcnow()
        for jti, expira_em in list(self._revogados.items()):
            if expira_em <= agora:
                del self._revogados[jti]

    def sign_out(self, sessao: Sessao) -> None:
        self.podar_revogados()
        try:
            payload = jwt.decode(sessao.access_token, SECRET_KEY, algorithms=[ALGORITHM])
            self._revogados[payload.get("jti")] = datetime.utcfromtimestamp(payload["exp"])
        except JWTError:
            pass  # token inválido já não abre sessão
        logger.info("Logout de %s", sessao.email)
        self._notificar(EventoSessao.SIGNED_OUT, None)

    def current_session(self, db: Session, token: str) -> Optional[Sessao]:
        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        except JWTError:
            return None
        email = payload.get("sub")
        if email is None or payload.get("jti") in self._revogados:
            return None
        usuario = get_user(db, email)
        if usuario is None:
            return None
        return Sessao(
            email=usuario.email,
            access_token=token,
            expira_em=datetime.utcfromtimestamp(payload["exp"]),
            usuario_id=usuario.id,
        )


servico_autenticacao = ServicoAutenticacao()


# --- DEPENDÊNCIAS DE AUTENTICAÇÃO ---
async def get_sessao(token: str = Depends(oauth2_scheme), db: Session = Depends(database.get_db)) -> Sessao:
    sessao = servico_autenticacao.current_session(db, token)
    if sessao is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas", headers={"WWW-Authenticate": "Bearer"},
        )
    return sessao
