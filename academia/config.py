# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida das variáveis de ambiente (e do arquivo .env).
"""

import os
from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Usa variável de ambiente ou default para SQLite
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./academia.db")

SECRET_KEY = os.environ.get("SECRET_KEY", "09d25e094faa6ca2556c818166b7a9563b93f7099f6f0f4caa6cf63b88e8d3e7")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 8))  # 8 horas

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5700")

LOG_FILE = os.getenv("LOG_FILE", "app.log") or None  # vazio: loga no stderr
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Conta criada no primeiro start
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@suaacademia.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
