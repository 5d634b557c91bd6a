# academia/routes/auth_fastapi.py
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from academia import database
from academia.auth import ErroAutenticacao, Sessao, get_sessao, get_user, servico_autenticacao
from academia.schemas import usuario as schemas_usuario


router = APIRouter(
    prefix="/api/v1/auth",
    tags=["Authentication"]
)


def _token(db: Session, sessao: Sessao):
    user_info = schemas_usuario.UsuarioRead.from_orm(get_user(db, sessao.email))
    return {"access_token": sessao.access_token, "token_type": "bearer", "user_info": user_info}


@router.post("/token", response_model=schemas_usuario.Token)
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(database.get_db)):
    try:
        # O campo "username" do formulário OAuth2 carrega o email
        sessao = servico_autenticacao.sign_in(db, form_data.username, form_data.password)
    except ErroAutenticacao as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _token(db, sessao)


@router.post("/signup", response_model=schemas_usuario.Token, status_code=status.HTTP_201_CREATED)
async def signup(credenciais: schemas_usuario.Credenciais, db: Session = Depends(database.get_db)):
    try:
        sessao = servico_autenticacao.sign_up(db, credenciais.email, credenciais.password)
    except ErroAutenticacao as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _token(db, sessao)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(sessao: Sessao = Depends(get_sessao)):
    servico_autenticacao.sign_out(sessao)


@router.get("/me", response_model=schemas_usuario.UsuarioRead)
async def read_users_me(sessao: Sessao = Depends(get_sessao), db: Session = Depends(database.get_db)):
    """
    Retorna os dados do usuário atualmente logado.
    """
    return get_user(db, sessao.email)
