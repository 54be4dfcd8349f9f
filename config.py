# config.py
import os
from dotenv import load_dotenv

# Pega o caminho absoluto do diretório do projeto.
basedir = os.path.abspath(os.path.dirname(__file__))

# Carrega as variáveis de ambiente do arquivo .env na raiz do projeto
load_dotenv(os.path.join(basedir, '.env'))

UPSTREAM_HOST = "https://v4.consultaoficialbr.com"


def parse_origins(valor):
    """
    Converte o valor de CORS_ALLOWED_ORIGINS em política de CORS:
    '*' (ou vazio) libera qualquer origem, senão uma lista separada por vírgulas.
    """
    if not valor or valor.strip() == '*':
        return '*'
    return frozenset(o.strip() for o in valor.split(',') if o.strip())


def parse_timeout(valor):
    if not valor:
        return None
    return float(valor)


def parse_bool(valor):
    return str(valor).strip().lower() in ('1', 'true', 'yes', 'sim')


class Config:
    # --- API DE CONSULTA DE CPF (UPSTREAM) ---
    CPF_UPSTREAM_URL = os.environ.get('CPF_UPSTREAM_URL') or f"{UPSTREAM_HOST}/api/consulta-cpf"
    CPF_UPSTREAM_ORIGIN = os.environ.get('CPF_UPSTREAM_ORIGIN') or UPSTREAM_HOST
    CPF_UPSTREAM_REFERER = os.environ.get('CPF_UPSTREAM_REFERER') or f"{UPSTREAM_HOST}/"
    CPF_UPSTREAM_USER_AGENT = os.environ.get('CPF_UPSTREAM_USER_AGENT') or "Mozilla/5.0"

    # Sem timeout por padrão: a chamada espera o que a pilha de rede permitir
    CPF_UPSTREAM_TIMEOUT = parse_timeout(os.environ.get('CPF_UPSTREAM_TIMEOUT'))

    # --- CORS ---
    CORS_ALLOWED_ORIGINS = parse_origins(os.environ.get('CORS_ALLOWED_ORIGINS'))
    CORS_ALLOW_CREDENTIALS = parse_bool(os.environ.get('CORS_ALLOW_CREDENTIALS', 'false'))


class StrictCorsConfig(Config):
    CORS_ALLOWED_ORIGINS = frozenset({
        "https://vzmdad.site",
        "https://www.vzmdad.site",
    })
