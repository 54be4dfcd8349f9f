# app/cors.py
from flask import request, current_app

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


def resolver_origem(origem, origens_permitidas):
    """
    Decide o valor de Access-Control-Allow-Origin.
    Retorna None quando a origem não pode ser liberada.
    """
    if origens_permitidas == '*':
        return '*'
    if origem and origem in origens_permitidas:
        return origem
    return None


def aplicar_cabecalhos_cors(response):
    """Aplica a política de CORS configurada a qualquer resposta da aplicação."""
    permitido = resolver_origem(
        request.headers.get('Origin'),
        current_app.config['CORS_ALLOWED_ORIGINS'],
    )
    if permitido:
        response.headers['Access-Control-Allow-Origin'] = permitido
        if permitido != '*':
            response.vary.add('Origin')

    response.headers['Access-Control-Allow-Methods'] = ALLOW_METHODS
    response.headers['Access-Control-Allow-Headers'] = ALLOW_HEADERS

    # Navegadores rejeitam credenciais junto com Allow-Origin: *
    if current_app.config.get('CORS_ALLOW_CREDENTIALS') and permitido and permitido != '*':
        response.headers['Access-Control-Allow-Credentials'] = 'true'
    return response


def init_cors(app):
    app.after_request(aplicar_cabecalhos_cors)
