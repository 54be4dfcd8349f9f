# app/consulta/routes.py

from flask import request, jsonify, current_app
from app.consulta import bp
from app.services import cpf_service


def extrair_cpf():
    """
    Lê o CPF da query string (?cpf=...) ou, em POST com JSON, do corpo {"cpf": "..."}.
    Retorna None para métodos que não sejam GET ou POST.
    """
    if request.method == 'GET':
        return str(request.args.get('cpf') or '').strip()

    if request.method == 'POST':
        if 'application/json' in (request.headers.get('Content-Type') or ''):
            corpo = request.get_json(silent=True)
            valor = corpo.get('cpf') if isinstance(corpo, dict) else None
            return str(valor).strip() if valor else ''
        # Sem JSON: tenta a query string
        return str(request.args.get('cpf') or '').strip()

    return None


@bp.route('/lookup', methods=['GET', 'POST', 'OPTIONS'])
def lookup():
    """
    Consulta um CPF no upstream e devolve os dados no formato DADOS_PESSOAIS.
    """
    logger = current_app.logger

    # Preflight do navegador
    if request.method == 'OPTIONS':
        return '', 204

    try:
        cpf = extrair_cpf()
        if cpf is None:
            return jsonify({"error": "Method not allowed"}), 405
        if not cpf:
            return jsonify({"error": "Missing cpf parameter"}), 400

        resultado = cpf_service.consultar_cpf(cpf)
        if not resultado['sucesso']:
            return jsonify(resultado['corpo']), resultado['status_code']

        return jsonify(resultado['dados']), 200
    except Exception as e:
        logger.error(f"Erro inesperado no proxy de consulta de CPF: {e}", exc_info=True)
        return jsonify({"success": False, "error": "Internal proxy error", "detail": str(e)}), 500
